import pygame
import pytest

from tilejumper.stage import (
    BACKGROUND_TILE_SIZE,
    TERRAIN_SPREAD,
    TERRAIN_TILE_SIZE,
    Stage,
    read_static,
    terrain_source_rect,
)

RED = pygame.Color(255, 0, 0)
GREEN = pygame.Color(0, 255, 0)
BLUE = pygame.Color(0, 0, 255)
WHITE = pygame.Color(255, 255, 255)
CLEAR = pygame.Color(0, 0, 0, 0)


def save_image(path, size, base, fills):
    surface = pygame.Surface(size)
    surface.fill(base)
    for rect, color in fills:
        surface.fill(color, pygame.Rect(rect))
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def assets(tmp_path):
    size = BACKGROUND_TILE_SIZE
    background = save_image(
        tmp_path / "backgrounds.bmp",
        (2 * size, size),
        RED,
        [((size, 0, size, size), GREEN)],
    )
    terrain = save_image(
        tmp_path / "terrain.bmp",
        (TERRAIN_SPREAD * TERRAIN_TILE_SIZE, 2 * TERRAIN_TILE_SIZE),
        WHITE,
        [((TERRAIN_TILE_SIZE, TERRAIN_TILE_SIZE, TERRAIN_TILE_SIZE, TERRAIN_TILE_SIZE), BLUE)],
    )
    level = tmp_path / "static.txt"
    level.write_text(f"1\n100 40 {TERRAIN_SPREAD + 1}\n", encoding="utf-8")
    return level, background, terrain


def test_read_static_parses_background_and_triples(tmp_path):
    level = tmp_path / "level.txt"
    level.write_text("2\n10 20 3\n30 40 5\n", encoding="utf-8")
    assert read_static(level) == (2, [(10, 20, 3), (30, 40, 5)])


def test_read_static_drops_incomplete_triple(tmp_path):
    level = tmp_path / "level.txt"
    level.write_text("0 10 20 3 30 40", encoding="utf-8")
    assert read_static(level) == (0, [(10, 20, 3)])


def test_read_static_stops_at_garbage(tmp_path):
    level = tmp_path / "level.txt"
    level.write_text("4 1 2 3 oops 5 6 7", encoding="utf-8")
    assert read_static(level) == (4, [(1, 2, 3)])


def test_read_static_empty_file(tmp_path):
    level = tmp_path / "level.txt"
    level.write_text("", encoding="utf-8")
    assert read_static(level) == (0, [])


def test_read_static_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_static(tmp_path / "absent.txt")


def test_terrain_source_rect_first_sprite():
    assert terrain_source_rect(0) == pygame.Rect(0, 0, TERRAIN_TILE_SIZE, TERRAIN_TILE_SIZE)
    assert terrain_source_rect(1).x == TERRAIN_TILE_SIZE


@pytest.mark.parametrize("tile_type", [0, 5, TERRAIN_SPREAD - 1])
def test_terrain_source_rect_wraps_rows(tile_type):
    here = terrain_source_rect(tile_type)
    below = terrain_source_rect(tile_type + TERRAIN_SPREAD)
    assert below.x == here.x
    assert below.y == here.y + TERRAIN_TILE_SIZE
    assert below.size == (TERRAIN_TILE_SIZE, TERRAIN_TILE_SIZE)


def test_stage_reads_level(assets):
    level, background, terrain = assets
    stage = Stage(130, 64, level, background, terrain)
    assert stage.background == 1
    assert stage.tiles == [(100, 40, TERRAIN_SPREAD + 1)]
    assert stage.screen.get_size() == (130, 64)


def test_stage_draws_chosen_background_including_edge(assets):
    level, background, terrain = assets
    stage = Stage(130, 64, level, background, terrain)
    assert stage.screen.get_at((10, 10)) == GREEN
    assert stage.screen.get_at((129, 10)) == GREEN


def test_stage_draws_terrain_tiles(assets):
    level, background, terrain = assets
    stage = Stage(130, 64, level, background, terrain)
    assert stage.screen.get_at((105, 45)) == BLUE


def test_stage_leaves_partial_rows_empty(assets):
    level, background, terrain = assets
    stage = Stage(64, 100, level, background, terrain)
    assert stage.screen.get_at((10, 10)) == GREEN
    assert stage.screen.get_at((10, 80)) == CLEAR


def test_build_redraws_with_other_background(assets):
    level, background, terrain = assets
    stage = Stage(130, 64, level, background, terrain)
    stage.build(0)
    assert stage.screen.get_at((10, 10)) == RED
    assert stage.screen.get_at((105, 45)) == BLUE


def test_stage_without_images_stays_transparent(assets, tmp_path):
    level, _, _ = assets
    stage = Stage(64, 64, level, tmp_path / "none.bmp", tmp_path / "none2.bmp")
    assert stage.screen.get_at((0, 0)) == CLEAR
    assert stage.tiles == [(100, 40, TERRAIN_SPREAD + 1)]


def test_stage_missing_level(tmp_path):
    with pytest.raises(FileNotFoundError):
        Stage(64, 64, tmp_path / "absent.txt")