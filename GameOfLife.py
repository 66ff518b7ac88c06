from enum import IntEnum

import numpy as np

BOUNDARY_POLICIES = ("bounded", "toroidal")


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1


class SeedFormatError(ValueError):
    """Raised when a seed does not fit the grid or cannot be parsed."""


class GameOfLife:
    def __init__(self, rows, cols, boundary="bounded", alive_char="#", dead_char="."):
        if not isinstance(rows, int) or not isinstance(cols, int) or rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive integers, got {rows}x{cols}.")
        if boundary not in BOUNDARY_POLICIES:
            raise ValueError(f"Unknown boundary policy '{boundary}', expected one of {BOUNDARY_POLICIES}.")
        if len(alive_char) != 1 or len(dead_char) != 1 or alive_char == dead_char:
            raise ValueError("Alive and dead glyphs must be two distinct single characters.")

        self.rows = rows
        self.cols = cols
        self.boundary = boundary
        self.glyphs = {CellState.ALIVE: alive_char, CellState.DEAD: dead_char}
        self.grid = self.initDeadGrid()
        self.directions = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]
        self.generation = 0

    def initDeadGrid(self):
        return np.full((self.rows, self.cols), CellState.DEAD, dtype=np.uint8)

    def initialize(self, seed):
        """
        Args:
            seed (iterable) - (row, col) pairs of cells that start ALIVE
        Raises:
            SeedFormatError: if any coordinate is malformed or outside the grid.
                The grid is left all DEAD in that case.
        """
        self.grid = self.initDeadGrid()
        self.generation = 0

        nextGrid = self.initDeadGrid()
        for entry in seed:
            try:
                r, c = entry
            except (TypeError, ValueError):
                raise SeedFormatError(f"Seed entry {entry!r} is not a (row, col) pair.") from None
            if isinstance(r, bool) or isinstance(c, bool) or \
                    not isinstance(r, (int, np.integer)) or not isinstance(c, (int, np.integer)):
                raise SeedFormatError(f"Seed coordinate {entry!r} must be integers.")
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise SeedFormatError(
                    f"Seed cell ({r}, {c}) lies outside the {self.rows}x{self.cols} grid.")
            nextGrid[r, c] = CellState.ALIVE

        self.grid = nextGrid

    def getCell(self, r, c):
        return CellState(int(self.grid[r, c]))

    def neighborCount(self, r, c):
        live_neighbors = 0
        for dr, dc in self.directions: #loop through neighbour directions
            nr, nc = r + dr, c + dc
            if self.boundary == "toroidal":
                nr, nc = nr % self.rows, nc % self.cols
            elif not (0 <= nr < self.rows and 0 <= nc < self.cols):
                continue #off the edge counts as dead
            if self.grid[nr, nc] == CellState.ALIVE:
                live_neighbors += 1
        return live_neighbors

    def neighborCounts(self, state):
        """Live neighbour count for every cell of `state` at once."""
        counts = np.zeros(state.shape, dtype=np.int16)
        if self.boundary == "toroidal":
            for dr, dc in self.directions:
                counts += np.roll(np.roll(state, -dr, axis=0), -dc, axis=1)
        else:
            padded = np.pad(state, 1, mode="constant", constant_values=CellState.DEAD)
            for dr, dc in self.directions:
                counts += padded[1 + dr:1 + dr + self.rows, 1 + dc:1 + dc + self.cols]
        return counts

    def step(self):
        snapshot = self.grid.copy()
        neighbors = self.neighborCounts(snapshot)

        survives = (snapshot == CellState.ALIVE) & ((neighbors == 2) | (neighbors == 3))
        born = (snapshot == CellState.DEAD) & (neighbors == 3)

        self.grid = np.where(survives | born, CellState.ALIVE, CellState.DEAD).astype(np.uint8)
        self.generation += 1

    def render(self):
        return "\n".join(
            "".join(self.glyphs[CellState(int(cell))] for cell in row) for row in self.grid)

    def liveCells(self):
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == CellState.ALIVE)]

    def liveCount(self):
        return int(np.count_nonzero(self.grid == CellState.ALIVE))

    def __str__(self):
        return self.render()
