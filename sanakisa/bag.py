"""Tile bag for Sanakisa.

Holds the full Finnish tile distribution (102 tiles including two blanks)
and deals from it.  Shuffling goes through the injected RNG so games can
be replayed from a seed.
"""

from __future__ import annotations

import random
from typing import Iterable

from sanakisa.constants import RACK_SIZE, TILE_BAG_DEFINITION
from sanakisa.errors import GameStateError
from sanakisa.tile import Tile, make_tile

TOTAL_TILES = sum(count for count, _points in TILE_BAG_DEFINITION.values())  # 102


def make_full_bag() -> list[Tile]:
    """Return a list of all tiles in the bag (unshuffled)."""
    bag: list[Tile] = []
    for letter, (count, points) in TILE_BAG_DEFINITION.items():
        bag.extend(make_tile(letter, points) for _ in range(count))
    return bag


class TileBag:
    def __init__(self, rng: random.Random | None = None, tiles: Iterable[Tile] | None = None):
        self.rng = rng or random.Random()
        self.tiles: list[Tile] = list(tiles) if tiles is not None else make_full_bag()
        self.rng.shuffle(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def draw(self, n: int) -> list[Tile]:
        """Take up to *n* tiles off the top."""
        drawn: list[Tile] = []
        while len(drawn) < n and self.tiles:
            drawn.append(self.tiles.pop())
        return drawn

    def refill(self, rack: list[Tile]) -> list[Tile]:
        """Top *rack* up to RACK_SIZE in place; returns the new tiles."""
        drawn = self.draw(RACK_SIZE - len(rack))
        rack.extend(drawn)
        return drawn

    def exchange(self, rack: list[Tile], tiles: Iterable[Tile]) -> list[Tile]:
        """Swap *tiles* from *rack* for fresh ones.

        The returned tiles go back in before the rack is refilled, so a
        player may draw some of them again.
        """
        if not self.tiles:
            raise GameStateError("The bag is empty; tiles cannot be exchanged.")
        returned = list(tiles)
        for tile in returned:
            for i, held in enumerate(rack):
                if held is tile:
                    del rack[i]
                    break
            else:
                raise GameStateError(f"tile {tile} is not on the rack")
        self.tiles.extend(returned)
        self.rng.shuffle(self.tiles)
        return self.refill(rack)
