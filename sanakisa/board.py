"""15×15 Sanakisa game board."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterable, Iterator

from sanakisa.constants import BOARD_SIZE, BONUS_GRID, CENTER, TILE_VALUES
from sanakisa.errors import CellOccupied, DuplicateTile
from sanakisa.tile import BlankTile, LetterTile, Tile

if TYPE_CHECKING:
    from sanakisa.move import Placement


class Board:
    """15x15 game board.  Cells are None (empty) or a tile.  A tile is
    *fixed* once a scored move has committed it, *pending* before that."""

    def __init__(self):
        self.cells: list[list[Tile | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def from_rows(cls, rows: str | Iterable[str]) -> Board:
        """Board from 15 strings of 15 characters, all tiles fixed.

        ``.`` is empty, an uppercase letter is a letter tile, a lowercase
        letter is a blank assigned to that letter.
        """
        if isinstance(rows, str):
            rows = [line.strip() for line in rows.strip().splitlines()]
        rows = [r for r in rows if r]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board needs 15 rows of 15 characters")
        board = cls()
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch == ".":
                    continue
                if not ch.isalpha():
                    raise ValueError(f"Invalid board character: {ch!r}")
                if ch.islower():
                    tile: Tile = BlankTile(assigned=ch.upper(), fixed=True)
                else:
                    tile = LetterTile(ch, TILE_VALUES.get(ch, 0), fixed=True)
                board.cells[r][c] = tile
        return board

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get(self, row: int, col: int) -> Tile | None:
        """Tile at (row, col), or None (also off the board)."""
        if self.in_bounds(row, col):
            return self.cells[row][col]
        return None

    def letter_at(self, row: int, col: int) -> str | None:
        """Letter the tile at (row, col) reads as, or None."""
        tile = self.get(row, col)
        return tile.face if tile is not None else None

    def place(self, row: int, col: int, tile: Tile) -> None:
        """Put a tile on an empty cell."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row},{col}) is off the board")
        if self.cells[row][col] is not None:
            raise CellOccupied(row, col)
        self.cells[row][col] = tile

    def remove(self, row: int, col: int) -> Tile | None:
        tile = self.get(row, col)
        if tile is not None:
            self.cells[row][col] = None
        return tile

    def is_empty(self, row: int, col: int) -> bool:
        """True if no tile at (row, col)."""
        return self.get(row, col) is None

    def is_occupied(self, row: int, col: int) -> bool:
        """True if there's a tile at (row, col)."""
        return not self.is_empty(row, col)

    def is_fixed(self, row: int, col: int) -> bool:
        tile = self.get(row, col)
        return tile is not None and tile.fixed

    def has_fixed_tiles(self) -> bool:
        return any(self.is_fixed(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE))

    def tiles(self) -> Iterator[tuple[int, int, Tile]]:
        """(row, col, tile) for every occupied cell, row-major."""
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                tile = self.cells[r][c]
                if tile is not None:
                    yield r, c, tile

    def pending_cells(self) -> list[tuple[int, int]]:
        return [(r, c) for r, c, tile in self.tiles() if not tile.fixed]

    def count_tiles(self) -> int:
        """Number of tiles on the board."""
        return sum(1 for _ in self.tiles())

    def check_integrity(self) -> None:
        """Raise if one physical tile sits on two cells."""
        seen: set[int] = set()
        for r, c, tile in self.tiles():
            if id(tile) in seen:
                raise DuplicateTile(f"tile {tile} at ({r},{c}) is on the board twice")
            seen.add(id(tile))

    @staticmethod
    def premium_at(row: int, col: int) -> str | None:
        """Multiplier kind at (row, col): DL, TL, DW, TW or None.

        The center square only marks where the opening move must go.
        """
        bonus = BONUS_GRID[row][col]
        if bonus in (".", "*"):
            return None
        return bonus

    @staticmethod
    def is_center(row: int, col: int) -> bool:
        return row == CENTER and col == CENTER

    @contextmanager
    def trial(self, placements: Iterable[Placement]) -> Iterator[Board]:
        """Lay placements on the board for the duration of the block.

        The cells are cleared again on every exit path, including when a
        placement in the middle of the list fails.
        """
        placed: list[tuple[int, int]] = []
        try:
            for p in placements:
                self.place(p.row, p.col, p.tile)
                placed.append((p.row, p.col))
            yield self
        finally:
            for r, c in reversed(placed):
                self.cells[r][c] = None

    def commit(self, cells: Iterable[tuple[int, int]]) -> None:
        """Mark the tiles on *cells* as fixed."""
        for r, c in cells:
            tile = self.get(r, c)
            if tile is not None:
                tile.fixed = True

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(BOARD_SIZE))
        sep = "   " + "---" * BOARD_SIZE
        lines = [header, sep]
        for r in range(BOARD_SIZE):
            parts = [f"{r:>2} |"]
            for c in range(BOARD_SIZE):
                tile = self.cells[r][c]
                if tile is not None:
                    parts.append(f" {tile} ")
                else:
                    bonus = BONUS_GRID[r][c]
                    if bonus in (".", "*"):
                        parts.append(f" {bonus} ")
                    else:
                        parts.append(f"{bonus:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)
