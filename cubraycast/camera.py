"""Player position, view direction and camera plane, with movement and turning."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from .constants import FOV, ROT, SPEED, Direction


@dataclass(frozen=True)
class Vec:
    """A 2D vector in map units."""

    x: float
    y: float

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec:
        return Vec(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def rotated(self, angle: float) -> Vec:
        """The vector turned by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


class Action(Enum):
    """Things the player can do during one step."""

    FORWARD = auto()
    BACKWARD = auto()
    STRAFE_LEFT = auto()
    STRAFE_RIGHT = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()


_FACING = {
    Direction.NO: Vec(0.0, -1.0),
    Direction.SO: Vec(0.0, 1.0),
    Direction.EA: Vec(1.0, 0.0),
    Direction.WE: Vec(-1.0, 0.0),
}


def _is_floor(grid: Sequence[str], col: int, row: int) -> bool:
    if not 0 <= row < len(grid):
        return False
    line = grid[row]
    return 0 <= col < len(line) and line[col] == "0"


@dataclass
class Camera:
    """The player's eye: position, facing direction and camera plane."""

    x: float
    y: float
    direction: Vec
    plane: Vec

    def rotate(self, angle: float) -> None:
        """Turn the view by ``angle`` radians."""
        self.direction = self.direction.rotated(angle)
        self.plane = self.plane.rotated(angle)

    def rotate_left(self) -> None:
        """Turn one rotation step to the left."""
        self.rotate(-ROT)

    def rotate_right(self) -> None:
        """Turn one rotation step to the right."""
        self.rotate(ROT)

    def move(self, grid: Sequence[str], dx: float, dy: float) -> None:
        """Move by (dx, dy), each axis separately and only onto floor cells."""
        next_x = self.x + dx
        next_y = self.y + dy
        if _is_floor(grid, int(next_x), int(self.y)):
            self.x = next_x
        if _is_floor(grid, int(self.x), int(next_y)):
            self.y = next_y

    def apply(self, action: Action, grid: Sequence[str]) -> None:
        """Carry out one player action against the map."""
        if action is Action.FORWARD:
            step = self.direction * SPEED
        elif action is Action.BACKWARD:
            step = -(self.direction * SPEED)
        elif action is Action.STRAFE_LEFT:
            step = -(self.plane * SPEED)
        elif action is Action.STRAFE_RIGHT:
            step = self.plane * SPEED
        elif action is Action.ROTATE_RIGHT:
            self.rotate_right()
            return
        elif action is Action.ROTATE_LEFT:
            self.rotate_left()
            return
        else:
            raise ValueError(f"unknown action: {action!r}")
        self.move(grid, step.x, step.y)


def camera_for(orientation: Direction, x: float, y: float) -> Camera:
    """A camera at (x, y) facing the given compass direction, with the game's field of view."""
    facing = _FACING[Direction(orientation)]
    plane_len = math.tan(math.radians(FOV) / 2.0)
    plane = Vec(-facing.y * plane_len, facing.x * plane_len)
    return Camera(x=x, y=y, direction=facing, plane=plane)