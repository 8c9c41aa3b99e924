"""Validation of the map grid of a scene and location of the player's start."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .constants import Direction, direction_from_letter

_PLAYER_LETTERS = "NSWE"
_CLOSED_EDGE = "1 "
_INTERIOR_CELLS = "10 "
_WALKABLE_NEIGHBOURS = "NSWE10"


class MapError(ValueError):
    """Raised when a map grid is not a valid, closed map with one player."""


@dataclass(frozen=True)
class PlayerStart:
    """Where the player starts, in map units, and which way they face."""

    x: float
    y: float
    orientation: Direction


def _edges_closed(grid: list[list[str]], row_index: int) -> bool:
    """The given row and the left column contain only walls and spaces."""
    if any(cell not in _CLOSED_EDGE for cell in grid[row_index]):
        return False
    for row in grid:
        if not row:
            break
        if row[0] not in _CLOSED_EDGE:
            return False
    return True


def _enclosed(grid: list[list[str]], i: int, j: int) -> bool:
    """A floor cell touches only floor, walls or the player on all four sides."""
    if i == 0 or i + 1 >= len(grid):
        return False
    row, above, below = grid[i], grid[i - 1], grid[i + 1]
    if j + 1 >= len(row):
        return False
    if j >= len(above) or j >= len(below):
        return False
    neighbours = (above[j], below[j], row[j - 1], row[j + 1])
    return all(cell in _WALKABLE_NEIGHBOURS for cell in neighbours)


def _check_interior(grid: list[list[str]]) -> PlayerStart | None:
    """Check every row but the last; replace the player letter by floor."""
    player: PlayerStart | None = None
    for i, row in enumerate(grid[:-1]):
        if not row:
            raise MapError("incorrect Map")
        for j, cell in enumerate(row[1:], start=1):
            if cell in _PLAYER_LETTERS:
                if player is not None:
                    raise MapError("incorrect Map")
                player = PlayerStart(j + 0.5, i + 0.5, direction_from_letter(cell))
                row[j] = cell = "0"
            if cell not in _INTERIOR_CELLS:
                raise MapError("incorrect Map")
            if cell == "0" and not _enclosed(grid, i, j):
                raise MapError("incorrect Map")
        if row[-1] not in _CLOSED_EDGE:
            raise MapError("incorrect Map")
    return player


def check_map(rows: Sequence[str]) -> tuple[list[str], PlayerStart]:
    """Validate a map and return its grid, with the player cell as floor, and the start."""
    grid = [list(row) for row in rows]
    if len(grid) < 3:
        raise MapError("Map too small")
    if not _edges_closed(grid, 0) or not _edges_closed(grid, len(grid) - 1):
        raise MapError("Map not closed")
    player = _check_interior(grid)
    if player is None:
        raise MapError("Player not found in Map")
    return ["".join(row) for row in grid], player