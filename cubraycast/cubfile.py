"""Reading ``.cub`` scene files: wall textures, colours and the map."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .constants import Direction
from .mapcheck import MapError, PlayerStart, check_map
from .textutil import WHITESPACE, atoi, is_number, iter_lines, split_fields, trim

_TEXTURE_PREFIXES = (
    ("NO ", Direction.NO),
    ("SO ", Direction.SO),
    ("WE ", Direction.WE),
    ("EA ", Direction.EA),
)
_ELEMENT_COUNT = 6


class SceneError(ValueError):
    """Raised when a scene file is malformed."""


@dataclass
class Scene:
    """Everything a scene file describes."""

    textures: dict[Direction, str]
    floor: int
    ceiling: int
    grid: list[str]
    player: PlayerStart


def parse_color(text: str) -> int:
    """Parse ``"R,G,B"`` with components 0..255 into a packed 0xRRGGBB value."""
    parts = split_fields(text, ",")
    if len(parts) != 3 or not all(is_number(trim(part, WHITESPACE)) for part in parts):
        raise SceneError("Invalid RGB values")
    red, green, blue = (atoi(part) for part in parts)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise SceneError("Invalid RGB values")
    return red << 16 | green << 8 | blue


@dataclass
class _Elements:
    """The identifier lines collected before the map."""

    paths: dict[Direction, str] = field(default_factory=dict)
    floor: int | None = None
    ceiling: int | None = None
    count: int = 0

    def accept(self, line: str) -> bool:
        """Take an identifier line; False when the line is not one that can be taken."""
        for prefix, direction in _TEXTURE_PREFIXES:
            if line.startswith(prefix) and direction not in self.paths:
                self.paths[direction] = line[len(prefix):]
                self.count += 1
                return True
        if line.startswith("F ") or line.startswith("C "):
            self._set_color(line[0], trim(line[2:], WHITESPACE))
            self.count += 1
            return True
        return False

    def _set_color(self, which: str, text: str) -> None:
        if which == "F":
            if self.floor is not None:
                raise SceneError("Floor color already set")
            self.floor = parse_color(text)
        else:
            if self.ceiling is not None:
                raise SceneError("Ceiling color already set")
            self.ceiling = parse_color(text)


def _map_rows(lines: list[str]) -> list[str]:
    rows = []
    for raw in lines:
        if not raw or raw.startswith("\n"):
            raise SceneError("Incorrect Map file")
        rows.append(raw.strip("\n"))
    return rows


def parse_scene(text: str) -> Scene:
    """Parse the full text of a scene file."""
    lines = list(iter_lines(text))
    elements = _Elements()
    map_start = len(lines)
    for index, raw in enumerate(lines):
        line = trim(raw, WHITESPACE)
        if elements.accept(line):
            continue
        if line.startswith("1"):
            map_start = index
            break
        if line:
            raise SceneError("Incorrect File")
    if elements.count != _ELEMENT_COUNT:
        raise SceneError("Missing Texture")

    rows = _map_rows(lines[map_start:])
    textures = {
        direction: trim(elements.paths[direction], WHITESPACE) for direction in Direction
    }
    try:
        grid, player = check_map(rows)
    except MapError as exc:
        raise SceneError(str(exc)) from exc
    assert elements.floor is not None and elements.ceiling is not None
    return Scene(
        textures=textures,
        floor=elements.floor,
        ceiling=elements.ceiling,
        grid=grid,
        player=player,
    )


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and parse a scene file from disk."""
    with open(path, encoding="latin-1", newline="") as handle:
        return parse_scene(handle.read())