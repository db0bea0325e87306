"""Static part of a level: background and terrain tiles."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

log = logging.getLogger(__name__)

BACKGROUND_TILE_SIZE = 64
TERRAIN_TILE_SIZE = 16
TERRAIN_SPREAD = 13

BACKGROUND_PATH = "src/backgrounds.bmp"
TERRAIN_PATH = "src/terrain.bmp"
LEVEL_PATH = "levels/lvl1/static.txt"

Tile = tuple[int, int, int]


def read_static(path) -> tuple[int, list[Tile]]:
    """Read a level file: a background index followed by ``x y type`` triples.

    Reading stops at the first token that is not an integer; an incomplete
    trailing triple is ignored.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()

    numbers: list[int] = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            break

    if not numbers:
        return 0, []
    background, *rest = numbers
    tiles = [tuple(triple) for triple in zip(*[iter(rest)] * 3)]
    return background, tiles


def terrain_source_rect(tile_type: int) -> pygame.Rect:
    """Area of the terrain sheet holding sprite number ``tile_type``."""
    row, column = divmod(tile_type, TERRAIN_SPREAD)
    return pygame.Rect(
        column * TERRAIN_TILE_SIZE,
        row * TERRAIN_TILE_SIZE,
        TERRAIN_TILE_SIZE,
        TERRAIN_TILE_SIZE,
    )


def _load_image(path) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        log.warning("Failed to load image %s: %s", path, exc)
        return None


class Stage:
    """A pre-rendered level canvas together with its collision tiles."""

    def __init__(
        self,
        width,
        height,
        level_path=LEVEL_PATH,
        background_path=BACKGROUND_PATH,
        terrain_path=TERRAIN_PATH,
    ):
        self.width = int(width)
        self.height = int(height)
        self.background_path = background_path
        self.terrain_path = terrain_path
        self.screen = pygame.Surface((self.width, self.height), pygame.SRCALPHA, 32)
        self.background, self.tiles = read_static(level_path)
        self.build(self.background)

    def build(self, background: int) -> None:
        """Draw the chosen background and every terrain tile onto the screen."""
        sheet = _load_image(self.background_path)
        if sheet is not None:
            size = BACKGROUND_TILE_SIZE
            full_columns = self.width // size
            remainder = self.width - full_columns * size
            tile_area = pygame.Rect(background * size, 0, size, size)
            edge_area = pygame.Rect(background * size, 0, remainder, size)
            for row in range(self.height // size):
                top = row * size
                for column in range(full_columns):
                    self.screen.blit(sheet, (column * size, top), tile_area)
                self.screen.blit(sheet, (full_columns * size, top), edge_area)

        terrain = _load_image(self.terrain_path)
        if terrain is not None:
            for x, y, tile_type in self.tiles:
                self.screen.blit(terrain, (x, y), terrain_source_rect(tile_type))