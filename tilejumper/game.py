"""Game loop: a stage, a player and a couple of breakable boxes."""

from __future__ import annotations

import argparse
from collections.abc import MutableSequence, Sequence

import pygame

from .box import Box
from .entity import Entity
from .player import Player
from .stage import BACKGROUND_PATH, LEVEL_PATH, TERRAIN_PATH, Stage

WINDOW_TITLE = "Test"
WINDOW_SIZE = (1000, 600)
STAGE_SIZE = (480, 420)
DEFAULT_BG_COLOR = (32, 30, 48)
OFFSET_X = 240
OFFSET_Y = 80


def step_entities(
    entities: MutableSequence[Entity], tiles: Sequence[Sequence[int]]
) -> list[Entity]:
    """Update every entity once and drop the ones that died.

    Each entity is updated against the current list, so a dead entity is
    gone before the entities after it are updated. Returns the entities that
    were updated this frame, in order; they are all drawn, dead ones included.
    """
    updated: list[Entity] = []
    for entity in list(entities):
        entity.update(tiles, entities)
        updated.append(entity)
        if not entity.alive:
            entities.remove(entity)
    return updated


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Run the platformer.")
    parser.add_argument("--level", default=LEVEL_PATH, help="level description file")
    parser.add_argument("--backgrounds", default=BACKGROUND_PATH, help="background sheet")
    parser.add_argument("--terrain", default=TERRAIN_PATH, help="terrain sheet")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error:
            print("Failed to create window")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        screen.fill(DEFAULT_BG_COLOR)

        try:
            stage = Stage(*STAGE_SIZE, args.level, args.backgrounds, args.terrain)
        except OSError:
            print(f"Could not open file {args.level}")
            return 1

        screen.blit(stage.screen, (0, 0))
        pygame.display.flip()

        player = Player(80, 208, 150, 100, (0, 0))
        entities: list[Entity] = [player, Box(172, 112, 3), Box(120, 112, 3)]

        running = True
        while running:
            screen.fill(DEFAULT_BG_COLOR)
            screen.blit(stage.screen, (OFFSET_X, OFFSET_Y))

            for entity in step_entities(entities, stage.tiles):
                image = entity.sprite()
                if image is not None:
                    screen.blit(image, (int(entity.x) + OFFSET_X, int(entity.y) + OFFSET_Y))

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                player.controls(event)
            pygame.display.flip()
        return 0
    finally:
        pygame.quit()