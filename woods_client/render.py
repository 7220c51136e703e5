"""Pygame based renderer for the viewer."""

from __future__ import annotations

import io
import logging
import math
from typing import Iterable, Optional, Tuple

import pygame

from . import constants
from .assets import AssetCache
from .errors import MountError
from .projection import Shape


def mount_view(size: Tuple[int, int]) -> pygame.Surface:
    """Open the window the view draws into.

    Raises :class:`MountError` when no display is available.
    """

    try:
        pygame.init()
        screen = pygame.display.set_mode(size)
    except pygame.error as exc:
        raise MountError(f"Cannot open a {size[0]}x{size[1]} window: {exc}") from exc
    pygame.display.set_caption("woods")
    return screen


def load_texture(assets: AssetCache, name: str) -> pygame.Surface:
    """Decode the image ``name`` from ``assets`` at shape size."""

    image = pygame.image.load(io.BytesIO(assets.load(name)), name)
    return pygame.transform.scale(image, (constants.SHAPE_SIZE, constants.SHAPE_SIZE))


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface, texture: Optional[pygame.Surface] = None) -> None:
        self.screen = screen
        self.texture = texture
        self.background_color = (255, 255, 255)
        self.shape_color = (0, 0, 0)

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw_shapes(self, shapes: Iterable[Shape]) -> None:
        for shape in shapes:
            if not (math.isfinite(shape.x) and math.isfinite(shape.y)):
                logging.debug("Skipping entity %s at non-finite position", shape.entity_id)
                continue
            rect = pygame.Rect(int(shape.x), int(shape.y), shape.width, shape.height)
            if self.texture is not None:
                self.screen.blit(self.texture, rect)
            else:
                pygame.draw.rect(self.screen, self.shape_color, rect)

    def present(self) -> None:
        pygame.display.flip()

    def redraw(self, shapes: Iterable[Shape]) -> None:
        self.clear()
        self.draw_shapes(shapes)
        self.present()
