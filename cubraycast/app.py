"""The game window: argument checks, the main loop and the command entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping, Sequence

import numpy as np

from .camera import Action, camera_for
from .constants import WIN_HEIGHT, WIN_WIDTH, WINDOW_TITLE, Direction
from .cubfile import Scene, load_scene
from .render import Texture, load_texture, render_frame

_EXTENSION = ".cub"


def check_args(argv: Sequence[str]) -> str:
    """Check the command arguments and return the path of a readable scene file."""
    if len(argv) != 1:
        raise ValueError("Wrong number of arguments")
    path = argv[0]
    if not path.endswith(_EXTENSION):
        raise ValueError("Wrong file extension")
    try:
        with open(path, "rb") as handle:
            handle.read(0)
    except FileNotFoundError:
        raise ValueError("File does not exist") from None
    except OSError:
        raise ValueError("File is not readable") from None
    return path


class Game:
    """A running scene: the player's camera and the frame it sees."""

    def __init__(
        self,
        scene: Scene,
        textures: Mapping[Direction, Texture],
        width: int = WIN_WIDTH,
    ) -> None:
        missing = [d.name for d in Direction if d not in textures]
        if missing:
            raise ValueError(f"missing textures: {', '.join(missing)}")
        self.scene = scene
        self.textures = dict(textures)
        self.camera = camera_for(scene.player.orientation, scene.player.x, scene.player.y)
        self.frame = np.zeros((WIN_HEIGHT, width), dtype=np.uint32)

    def step(self, actions: Iterable[Action]) -> np.ndarray:
        """Apply the actions in order, then draw and return the new frame."""
        for action in actions:
            self.camera.apply(action, self.scene.grid)
        return render_frame(
            self.frame,
            self.camera,
            self.scene.grid,
            self.textures,
            self.scene.floor,
            self.scene.ceiling,
        )

    def run(self) -> None:
        """Open the window and play until it is closed or Escape is pressed."""
        import pygame

        try:
            pygame.init()
            screen = pygame.display.set_mode((self.frame.shape[1], WIN_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError("failed to initialize display") from exc

        keys = {
            pygame.K_w: Action.FORWARD,
            pygame.K_s: Action.BACKWARD,
            pygame.K_a: Action.STRAFE_LEFT,
            pygame.K_d: Action.STRAFE_RIGHT,
            pygame.K_RIGHT: Action.ROTATE_RIGHT,
            pygame.K_LEFT: Action.ROTATE_LEFT,
        }
        try:
            while True:
                actions = []
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                        if event.key == pygame.K_ESCAPE:
                            return
                        if event.key in keys:
                            actions.append(keys[event.key])
                frame = self.step(actions)
                rgb = np.stack(
                    ((frame >> 16) & 0xFF, (frame >> 8) & 0xFF, frame & 0xFF), axis=-1
                ).astype(np.uint8)
                pygame.surfarray.blit_array(screen, rgb.transpose(1, 0, 2))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the scene file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
        scene = load_scene(path)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        textures = {d: load_texture(os.fspath(scene.textures[d])) for d in Direction}
    except (OSError, ValueError):
        print("error : failed to load textures", file=sys.stderr)
        return 1
    try:
        Game(scene, textures).run()
    except RuntimeError as exc:
        print(f"error : {exc}", file=sys.stderr)
        return 1
    return 0