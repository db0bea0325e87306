"""A breakable box that loses health when the player touches it."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import Optional

import pygame

from .entity import Entity
from .player import Player

BOX_WIDTH = 28
BOX_HEIGHT = 24
SPRITE_PATH = "src/box_idle.bmp"


class Box(Entity):
    """A static box that is hit once per contact with a player."""

    def __init__(self, x, y, hp, sprite_path=SPRITE_PATH):
        super().__init__(x, y, BOX_WIDTH, BOX_HEIGHT, 0, True)
        self.hp = int(hp)
        self.collided = False
        self.sprite_path = sprite_path

    @cached_property
    def _sheet(self) -> Optional[pygame.Surface]:
        return self._load_surface(self.sprite_path)

    def check_collision(self, other: Entity) -> None:
        """Take one hit when ``other`` starts overlapping the box."""
        other_x = int(other.x)
        other_y = int(other.y)
        if (
            other_x - self.width <= self.x <= other_x + other.width
            and self.y >= other_y - self.height
            and other_y + other.height >= self.y
        ):
            if not self.collided:
                self.collided = True
                self.hp -= 1
                if self.hp <= 0:
                    self.alive = False
            return
        self.collided = False

    def update(self, static_elements: Sequence[Sequence[int]], entities: Sequence[Entity]) -> None:
        """Check contact with every player among ``entities``."""
        for entity in entities:
            if isinstance(entity, Player):
                self.check_collision(entity)

    def sprite(self) -> Optional[pygame.Surface]:
        """Return the box image, or None if it could not be loaded."""
        return self._sheet