"""Game-wide settings and the four wall/facing directions."""

from __future__ import annotations

from enum import IntEnum

FOV = 60
SPEED = 0.03
ROT = 0.02

WIN_WIDTH = 1920
WIN_HEIGHT = 1080

WINDOW_TITLE = "Cub3d"


class Direction(IntEnum):
    """Compass directions, used both for the player's facing and wall textures."""

    NO = 0
    SO = 1
    EA = 2
    WE = 3


_LETTERS = {
    "N": Direction.NO,
    "S": Direction.SO,
    "E": Direction.EA,
    "W": Direction.WE,
}


def direction_from_letter(letter: str) -> Direction:
    """Return the direction named by a map letter: N, S, E or W."""
    try:
        return _LETTERS[letter]
    except (KeyError, TypeError):
        raise ValueError(f"not a direction letter: {letter!r}") from None