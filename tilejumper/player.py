"""The player-controlled character."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import cached_property
from typing import Optional

import pygame

from .entity import Entity

PLAYER_WIDTH = 32
PLAYER_HEIGHT = 32
OTHER_SIZE = 16
GRAVITY_ACC_TIME = 40
GRAVITY_MOD = 0.1
MAX_JUMPS = 2
SPRITE_PATH = "src/player_idle.bmp"


class Player(Entity):
    """A character that walks, jumps twice and collides with its surroundings.

    ``directions`` holds the horizontal and vertical speed factors; ``clock``
    returns the current time in milliseconds.
    """

    def __init__(
        self,
        x,
        y,
        speed,
        health,
        directions=(0.0, 0.0),
        clock: Optional[Callable[[], float]] = None,
        sprite_path=SPRITE_PATH,
    ):
        super().__init__(x, y, PLAYER_WIDTH, PLAYER_HEIGHT, speed, True)
        directions = [float(value) for value in directions]
        if len(directions) != 2:
            raise ValueError("directions must have exactly two components")
        self.health = float(health)
        self.directions = directions
        self.key_hold = 0
        self.jumps = 0
        self.sprite_path = sprite_path
        self._clock = clock if clock is not None else pygame.time.get_ticks
        self._prev_time = 0.0
        self._gravity_time = 0.0

    @cached_property
    def _sheet(self) -> Optional[pygame.Surface]:
        return self._load_surface(self.sprite_path)

    def update(self, static_elements: Sequence[Sequence[int]], entities: Sequence[Entity]) -> None:
        """Apply gravity, move, then resolve collisions with tiles and entities."""
        current_time = float(self._clock())
        if self._prev_time == 0:
            self._prev_time = current_time
            return
        delta = current_time - self._prev_time
        self._gravity_time += delta
        self._prev_time = current_time

        if self.directions[1] < 1 and self._gravity_time >= GRAVITY_ACC_TIME:
            self.directions[1] += GRAVITY_MOD
            self._gravity_time -= GRAVITY_ACC_TIME

        self.move(delta)

        for element in static_elements:
            self.check_collision(element[0], element[1], OTHER_SIZE, OTHER_SIZE)

        for entity in entities:
            if not isinstance(entity, Player):
                self.check_collision(int(entity.x), int(entity.y), entity.width, entity.height)

    def move(self, delta_time: float) -> None:
        """Move according to the directions over ``delta_time`` milliseconds."""
        self.x += self.directions[0] * delta_time / 1000 * self.speed
        self.y += self.directions[1] * delta_time / 1000 * self.speed * 2

    def controls(self, event) -> None:
        """React to A/D (walk) and SPACE (jump) key events."""
        key = getattr(event, "key", None)
        if event.type == pygame.KEYDOWN:
            if key == pygame.K_SPACE:
                if self.jumps < MAX_JUMPS:
                    self.jumps += 1
                    self.directions[1] = -1.0
            elif key == pygame.K_a:
                self.directions[0] = -0.1
                self.key_hold = -1
            elif key == pygame.K_d:
                self.directions[0] = 0.1
                self.key_hold = 1
        elif event.type == pygame.KEYUP and key in (pygame.K_a, pygame.K_d):
            self.directions[0] = 0.0
            self.key_hold = 0

    def check_collision(self, other_x, other_y, other_width, other_height) -> None:
        """Push the player out of an overlapping rectangle and stop movement into it.

        Landing on top of the rectangle resets the jump count.
        """
        this_mid_x = int(self.x + PLAYER_WIDTH // 2)
        this_mid_y = int(self.y + PLAYER_HEIGHT // 2)
        other_mid_x = other_x + other_width // 2
        other_mid_y = other_y + other_height // 2
        x_diff = abs(this_mid_x - other_mid_x)
        y_diff = abs(this_mid_y - other_mid_y)

        if not (other_x - PLAYER_WIDTH <= self.x <= other_x + other_width):
            self.directions[0] = float(self.key_hold)
            return
        if not (self.y >= other_y - PLAYER_HEIGHT and other_y + other_height >= self.y):
            return

        if x_diff >= y_diff:
            overlap_x = (PLAYER_WIDTH + other_width) // 2 - x_diff
            if self.x > other_x and self.directions[0] < 0:
                self.x += overlap_x
                self.directions[0] = 0.0
            if self.x < other_x and self.directions[0] > 0:
                self.x -= overlap_x
                self.directions[0] = 0.0
        else:
            overlap_y = (PLAYER_HEIGHT + other_height) // 2 - y_diff
            if self.y > other_y and self.directions[1] < 0:
                self.y += overlap_y
                self.directions[1] = 0.0
            if self.y < other_y and self.directions[1] > 0:
                self.jumps = 0
                self.y -= overlap_y
                self.directions[1] = 0.0

    def sprite(self) -> pygame.Surface:
        """Return a fresh surface with the top-left frame of the sprite sheet."""
        surface = pygame.Surface((PLAYER_WIDTH, PLAYER_HEIGHT), pygame.SRCALPHA, 32)
        if self._sheet is not None:
            surface.blit(self._sheet, (0, 0), pygame.Rect(0, 0, PLAYER_WIDTH, PLAYER_HEIGHT))
        return surface