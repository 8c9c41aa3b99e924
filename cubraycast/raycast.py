"""Grid ray casting (DDA) and the wall geometry that follows from each hit."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .camera import Camera, Vec
from .constants import WIN_HEIGHT, Direction


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray met a wall, and how tall that wall is drawn."""

    map_x: int
    map_y: int
    side: int
    ray_dir: Vec
    distance: float
    wall_height: int
    wall_start: int
    wall_end: int

    @property
    def direction(self) -> Direction:
        """The texture direction of the wall face that was hit."""
        return hit_direction(self.side, self.ray_dir.x, self.ray_dir.y)


def wall_span(distance: float, screen_height: int) -> tuple[int, int, int]:
    """Return (height, first row, last row) of a wall seen at ``distance``."""
    if not distance > 0:
        raise ValueError(f"wall distance must be positive, got {distance!r}")
    raw_height = screen_height / distance
    raw_start = (screen_height - raw_height) / 2.0
    height = int(raw_height) if math.isfinite(raw_height) else screen_height
    start = max(int(math.ceil(raw_start)), 0) if math.isfinite(raw_start) else 0
    raw_end = raw_start + raw_height
    if math.isfinite(raw_end):
        end = min(int(math.floor(raw_end)), screen_height - 1)
    else:
        end = screen_height - 1
    return height, start, end


def hit_direction(side: int, ray_dir_x: float, ray_dir_y: float) -> Direction:
    """Which texture a wall face uses, from the side hit and the ray direction."""
    if side == 0:
        return Direction.EA if ray_dir_x < 0 else Direction.WE
    return Direction.SO if ray_dir_y < 0 else Direction.NO


def texture_y(tex_pos: float, tex_height: int) -> int:
    """Texture row for a position along the wall, clamped to the texture."""
    row = int(tex_pos)
    if row < 0:
        row = 0
    if row >= tex_height:
        row = tex_height - 1
    return row


def _delta(along: float, across: float) -> float:
    if along == 0:
        return math.inf
    return math.sqrt(1 + (across * across) / (along * along))


def _scaled(offset: float, delta: float) -> float:
    return math.inf if math.isinf(delta) else offset * delta


def _is_open(grid: Sequence[str], col: int, row: int) -> bool:
    """True while the ray may keep going; leaving the grid counts as a hit."""
    if not 0 <= row < len(grid):
        return False
    line = grid[row]
    if not 0 <= col < len(line):
        return False
    return line[col] != "1"


def cast_ray(camera: Camera, grid: Sequence[str], cam_x: float) -> RayHit:
    """Cast the ray at camera-plane offset ``cam_x`` (-1 left edge, 1 right edge)."""
    ray = camera.direction + camera.plane * cam_x
    map_x = int(camera.x)
    map_y = int(camera.y)
    delta_x = _delta(ray.x, ray.y)
    delta_y = _delta(ray.y, ray.x)

    if ray.x < 0:
        step_x = -1
        side_x = _scaled(camera.x - map_x, delta_x)
    else:
        step_x = 1
        side_x = _scaled(map_x + 1.0 - camera.x, delta_x)
    if ray.y < 0:
        step_y = -1
        side_y = _scaled(camera.y - map_y, delta_y)
    else:
        step_y = 1
        side_y = _scaled(map_y + 1.0 - camera.y, delta_y)

    side = 0
    while _is_open(grid, map_x, map_y):
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1

    raw = side_x - delta_x if side == 0 else side_y - delta_y
    angle = math.atan2(ray.y, ray.x) - math.atan2(camera.direction.y, camera.direction.x)
    distance = raw * math.cos(angle)
    height, start, end = wall_span(distance, WIN_HEIGHT)
    return RayHit(
        map_x=map_x,
        map_y=map_y,
        side=side,
        ray_dir=ray,
        distance=distance,
        wall_height=height,
        wall_start=start,
        wall_end=end,
    )


def cast_frame(camera: Camera, grid: Sequence[str], width: int) -> list[RayHit]:
    """Cast one ray per screen column, left to right."""
    return [cast_ray(camera, grid, 2 * x / width - 1) for x in range(width)]