#!/usr/bin/env python3
# File: gridtui/selection.py
# Purpose: the cursor over the grid and its wrap-around moves (no curses here).
# Notes:
#   - Rows and columns wrap independently (a torus): off one edge, back on the opposite one.
#   - Every move is total; the cursor can never leave the grid once constructed.

from __future__ import annotations


class Cursor:
    """Selected (row, column) over a fixed rows × columns grid."""

    def __init__(self, rows: int = 3, columns: int = 3, row: int = 0, column: int = 0):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{columns}")
        if not (0 <= row < rows and 0 <= column < columns):
            raise ValueError(f"cursor ({row}, {column}) is outside a {rows}x{columns} grid")
        self.rows = rows
        self.columns = columns
        self.row = row
        self.column = column

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.column)

    # ----- Row axis -----
    def advance_row(self) -> None:
        self.row = (self.row + 1) % self.rows

    def retreat_row(self) -> None:
        self.row = (self.row - 1 + self.rows) % self.rows

    # ----- Column axis -----
    def advance_column(self) -> None:
        self.column = (self.column + 1) % self.columns

    def retreat_column(self) -> None:
        self.column = (self.column - 1 + self.columns) % self.columns

    def __repr__(self) -> str:
        return f"Cursor(row={self.row}, column={self.column}, grid={self.rows}x{self.columns})"


__all__ = ["Cursor"]
