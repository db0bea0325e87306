"""Common base for everything that lives on a stage."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from os import PathLike
from typing import Optional, Union

import pygame

log = logging.getLogger(__name__)

StrPath = Union[str, "PathLike[str]"]


class Entity(ABC):
    """A rectangular object with a position, a size and a speed."""

    def __init__(self, x, y, width, height, speed, alive=True):
        self.x = float(x)
        self.y = float(y)
        self.width = int(width)
        self.height = int(height)
        self.speed = float(speed)
        self.alive = bool(alive)

    @abstractmethod
    def update(
        self,
        static_elements: Sequence[Sequence[int]],
        entities: Sequence["Entity"],
    ) -> None:
        """Advance the entity by one frame."""

    @abstractmethod
    def sprite(self) -> Optional[pygame.Surface]:
        """Return the image to draw for the entity, or None if there is none."""

    @staticmethod
    def _load_surface(path: StrPath) -> Optional[pygame.Surface]:
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            log.warning("Failed to load image %s: %s", path, exc)
            return None