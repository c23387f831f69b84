"""Anchor squares: where a new word may attach to the board."""

from __future__ import annotations

from dataclasses import dataclass, field

from sanakisa.board import Board
from sanakisa.constants import BOARD_SIZE, CENTER


@dataclass
class Anchors:
    cells: list[tuple[int, int]] = field(default_factory=list)
    by_row: dict[int, list[int]] = field(default_factory=dict)  # row -> anchor cols
    by_col: dict[int, list[int]] = field(default_factory=dict)  # col -> anchor rows

    def add(self, row: int, col: int) -> None:
        self.cells.append((row, col))
        self.by_row.setdefault(row, []).append(col)
        self.by_col.setdefault(col, []).append(row)

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, cell: tuple[int, int]) -> bool:
        return cell in self.cells


def find_anchors(board: Board) -> Anchors:
    """Empty squares next to a fixed tile, or the center on an opening move."""
    anchors = Anchors()
    if not board.has_fixed_tiles():
        anchors.add(CENTER, CENTER)
        return anchors

    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if board.is_occupied(r, c):
                continue
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                if board.is_fixed(r + dr, c + dc):
                    anchors.add(r, c)
                    break
    return anchors
