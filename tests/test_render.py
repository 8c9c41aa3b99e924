import numpy as np
import pytest
from PIL import Image

from cubraycast.camera import Camera, Vec, camera_for
from cubraycast.constants import WIN_HEIGHT, Direction
from cubraycast.raycast import RayHit, cast_ray
from cubraycast.render import (
    Texture,
    draw_column,
    load_texture,
    render_frame,
    texture_x,
)

GRID = ["11111", "10001", "10001", "10001", "11111"]
FLOOR = 0x0A141E
CEILING = 0x28323C


def solid_textures():
    return {
        direction: Texture(np.full((8, 8), value, dtype=np.uint32))
        for direction, value in zip(Direction, (11, 22, 33, 44))
    }


def make_hit(side, ray_dir, distance=1.0):
    return RayHit(
        map_x=0,
        map_y=0,
        side=side,
        ray_dir=ray_dir,
        distance=distance,
        wall_height=100,
        wall_start=490,
        wall_end=590,
    )


def test_load_texture_packs_rgb(tmp_path):
    image = Image.new("RGB", (3, 2), (0, 0, 0))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((2, 1), (0, 0, 255))
    path = tmp_path / "wall.png"
    image.save(path)
    texture = load_texture(path)
    assert texture.width == 3
    assert texture.height == 2
    assert texture.pixels[0, 0] == 0xFF0000
    assert texture.pixels[1, 2] == 0x0000FF
    assert texture.pixels[1, 0] == 0


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "missing.xpm")


def test_texture_rejects_empty():
    with pytest.raises(ValueError):
        Texture(np.zeros((0, 4), dtype=np.uint32))


def test_texture_x_on_cell_boundary_is_zero():
    camera = Camera(2.5, 2.5, Vec(0.0, -1.0), Vec(0.5, 0.0))
    hit = make_hit(1, Vec(0.5, -1.0))
    assert texture_x(hit, camera, 64) == 0


def test_texture_x_side_uses_y_coordinate():
    camera = Camera(2.5, 2.5, Vec(1.0, 0.0), Vec(0.0, 0.5))
    hit = make_hit(0, Vec(1.0, 0.25))
    assert texture_x(hit, camera, 64) == 48


@pytest.mark.parametrize("cam_x", [-1.0, -0.3, 0.0, 0.4, 0.99])
def test_texture_x_in_range(cam_x):
    camera = camera_for(Direction.EA, 2.3, 1.7)
    hit = cast_ray(camera, GRID, cam_x)
    assert 0 <= texture_x(hit, camera, 16) < 16


def test_draw_column_fills_ceiling_wall_and_floor():
    textures = solid_textures()
    camera = camera_for(Direction.NO, 2.5, 2.5)
    hit = cast_ray(camera, GRID, 0.0)
    frame = np.zeros((WIN_HEIGHT, 1), dtype=np.uint32)
    draw_column(frame, hit, camera, textures, 0, FLOOR, CEILING)
    column = frame[:, 0]
    assert (column[: hit.wall_start] == CEILING).all()
    wall_colour = textures[hit.direction].pixels[0, 0]
    assert (column[hit.wall_start : hit.wall_end] == wall_colour).all()
    assert (column[hit.wall_end : WIN_HEIGHT - 1] == FLOOR).all()
    assert column[WIN_HEIGHT - 1] == 0


def test_draw_column_walks_texture_downwards():
    rows = np.repeat(np.arange(64, dtype=np.uint32)[:, None], 64, axis=1)
    textures = {direction: Texture(rows) for direction in Direction}
    camera = camera_for(Direction.SO, 2.5, 1.5)
    hit = cast_ray(camera, GRID, 0.2)
    frame = np.zeros((WIN_HEIGHT, 1), dtype=np.uint32)
    draw_column(frame, hit, camera, textures, 0, FLOOR, CEILING)
    wall = frame[hit.wall_start : hit.wall_end, 0].astype(np.int64)
    assert len(wall) > 0
    assert (np.diff(wall) >= 0).all()
    assert wall.min() >= 0 and wall.max() <= 63


def test_render_frame_draws_every_column():
    textures = solid_textures()
    camera = camera_for(Direction.WE, 2.5, 2.5)
    frame = np.zeros((WIN_HEIGHT, 6), dtype=np.uint32)
    result = render_frame(frame, camera, GRID, textures, FLOOR, CEILING)
    assert result is frame
    assert (frame[0, :] == CEILING).all()
    assert (frame[WIN_HEIGHT - 2, :] == FLOOR).all()
    colours = {int(t.pixels[0, 0]) for t in textures.values()}
    middle = frame[WIN_HEIGHT // 2, :]
    assert all(int(value) in colours for value in middle)