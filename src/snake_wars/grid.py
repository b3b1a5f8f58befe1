"""Square arena grid with an occupancy array for AI lookups."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    OBSTACLE = 2


def is_out_of_bounds(cell: tuple[int, int], grid_size: int) -> bool:
    """Check whether *cell* falls outside a ``grid_size`` square."""
    row, col = cell
    return row < 0 or row >= grid_size or col < 0 or col >= grid_size


class Grid:
    """NumPy-backed square arena.

    The occupancy array is repainted from every snake body once per
    tick, so AI controllers get O(1) membership checks and a ready-made
    walkability grid for pathfinding. Coordinates use (row, col) ordering
    consistent with NumPy indexing.
    """

    def __init__(self, size: int = 30) -> None:
        if size < 1:
            raise ValueError("Grid size must be at least 1.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[row, col])

    def set(self, row: int, col: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[row, col] = cell_type

    def paint(
        self,
        bodies: Iterable[Iterable[tuple[int, int]]],
        obstacles: Iterable[Iterable[tuple[int, int]]] = (),
    ) -> None:
        """Clear the grid, then mark live *bodies* and dead *obstacles*.

        Both kinds of cell are blocked; only the code differs.
        """
        self.clear()
        for body in obstacles:
            for r, c in body:
                self.cells[r, c] = CellType.OBSTACLE
        for body in bodies:
            for r, c in body:
                self.cells[r, c] = CellType.SNAKE

    def is_free(self, row: int, col: int) -> bool:
        """True if the coordinate is in bounds and not occupied."""
        return self.in_bounds(row, col) and self.cells[row, col] == CellType.EMPTY

    def walkable(self) -> np.ndarray:
        """Return a boolean array that is ``True`` wherever no body lies."""
        return self.cells == CellType.EMPTY

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return a list of all empty cell coordinates."""
        rows, cols = np.where(self.cells == CellType.EMPTY)
        return list(zip(rows.tolist(), cols.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "size": self.size,
            "cells": self.cells.tolist(),
        }
