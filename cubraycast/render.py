"""Drawing textured wall columns, floor and ceiling into a frame of packed colours."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np
from PIL import Image

from .camera import Camera
from .constants import Direction
from .raycast import RayHit, cast_frame


@dataclass(frozen=True, eq=False)
class Texture:
    """A wall texture: rows of packed 0xRRGGBB pixels."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        pixels = np.asarray(self.pixels, dtype=np.uint32)
        if pixels.ndim != 2 or 0 in pixels.shape:
            raise ValueError("texture must be a non-empty 2D array of packed colours")
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file (XPM, PNG, ...) as a texture."""
    with Image.open(path) as image:
        rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
    packed = (rgb[:, :, 0] << 16) | (rgb[:, :, 1] << 8) | rgb[:, :, 2]
    return Texture(packed)


def texture_x(hit: RayHit, camera: Camera, tex_width: int) -> int:
    """Texture column for the point where the ray met the wall."""
    if hit.side == 0:
        wall_x = camera.y + hit.distance * hit.ray_dir.y
    else:
        wall_x = camera.x + hit.distance * hit.ray_dir.x
    wall_x -= math.floor(wall_x)
    column = int(wall_x * tex_width)
    if column < 0:
        column = 0
    if column >= tex_width:
        column = tex_width - 1
    return column


def draw_column(
    frame: np.ndarray,
    hit: RayHit,
    camera: Camera,
    textures: Mapping[Direction, Texture],
    x: int,
    floor: int,
    ceiling: int,
) -> None:
    """Draw one screen column: the textured wall, the ceiling above and the floor below.

    The bottom row of the frame is left untouched.
    """
    screen_height = frame.shape[0]
    texture = textures[hit.direction]
    wall_end = min(hit.wall_end, screen_height)
    if hit.wall_height > 0 and wall_end > hit.wall_start:
        column = texture_x(hit, camera, texture.width)
        step = texture.height / hit.wall_height
        tex_pos = (hit.wall_start - screen_height // 2 + hit.wall_height // 2) * step
        rows = np.arange(hit.wall_start, wall_end)
        positions = tex_pos + step * np.arange(1, len(rows) + 1)
        tex_rows = np.clip(positions.astype(np.int64), 0, texture.height - 1)
        frame[rows, x] = texture.pixels[tex_rows, column]
    frame[: hit.wall_start, x] = ceiling
    frame[hit.wall_end : screen_height - 1, x] = floor


def render_frame(
    frame: np.ndarray,
    camera: Camera,
    grid: Sequence[str],
    textures: Mapping[Direction, Texture],
    floor: int,
    ceiling: int,
) -> np.ndarray:
    """Cast a ray for every column of ``frame`` and draw the view into it."""
    for x, hit in enumerate(cast_frame(camera, grid, frame.shape[1])):
        draw_column(frame, hit, camera, textures, x, floor, ceiling)
    return frame