#!/usr/bin/env python3
# File: gridtui/config.py
# Purpose: environment-driven knobs, resolved once at startup (no files, no CLI flags).
#   GRIDTUI_PALETTE    palette name (blue / emerald / indigo / red)
#   GRIDTUI_LOG        log file path; unset = no logging
#   GRIDTUI_LOG_LEVEL  logging level name (default INFO)

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .theme import DEFAULT_PALETTE, PALETTE_PRESETS


@dataclass(frozen=True)
class Settings:
    palette: str = DEFAULT_PALETTE
    log_file: str | None = None
    log_level: str = "INFO"


def _str_env(env: Mapping[str, str], name: str) -> str:
    return (env.get(name, "") or "").strip()

def _resolve_palette_name(env: Mapping[str, str]) -> str:
    name = _str_env(env, "GRIDTUI_PALETTE").lower()
    if name and name in PALETTE_PRESETS:
        return name
    return DEFAULT_PALETTE

def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    if env is None:
        env = os.environ
    return Settings(
        palette=_resolve_palette_name(env),
        log_file=_str_env(env, "GRIDTUI_LOG") or None,
        log_level=_str_env(env, "GRIDTUI_LOG_LEVEL").upper() or "INFO",
    )


__all__ = ["Settings", "load_settings"]
