import pytest

from dungeon_crawler.level import DEFAULT_LAYOUT, PLAYER_TEXTURE, START_POSITION, Level
from dungeon_crawler.tiles import Floor, Portal, Wall


def test_default_dimensions_match_layout():
    level = Level()
    assert level.height == len(DEFAULT_LAYOUT)
    assert level.width == len(DEFAULT_LAYOUT[0])


def test_tiles_follow_layout():
    level = Level()
    kinds = {"#": Wall, ".": Floor, "O": Portal}
    for r, line in enumerate(DEFAULT_LAYOUT):
        for c, symbol in enumerate(line):
            tile = level.tile_at(r, c)
            assert isinstance(tile, kinds[symbol])
            assert (tile.row, tile.column) == (r, c)
            assert tile.base_texture == symbol


def test_rows_cover_grid():
    level = Level()
    rows = list(level.rows())
    assert len(rows) == level.height
    assert all(len(row) == level.width for row in rows)
    assert rows[1][1] is level.tile_at(1, 1)


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (10, 0), (0, 10)])
def test_tile_at_outside_is_none(position):
    assert Level().tile_at(*position) is None


def test_portals_are_paired():
    level = Level()
    first, second = level.tile_at(1, 1), level.tile_at(7, 1)
    assert first.destination is second
    assert second.destination is first


def test_player_starts_at_start_position():
    level = Level()
    player = level.player
    assert player.texture == PLAYER_TEXTURE
    assert player.tile is level.tile_at(*START_POSITION)
    assert player.tile.character is player
    assert level.characters == [player]


def test_place_character_moves_and_clears_old_tile():
    level = Level()
    player = level.player
    old = player.tile
    level.place_character(player, 4, 5)
    assert old.character is None
    assert player.tile is level.tile_at(4, 5)
    assert level.tile_at(4, 5).character is player


def test_place_character_ignores_enter_rules():
    level = Level()
    wall = level.tile_at(0, 0)
    level.place_character(level.player, 0, 0)
    assert level.player.tile is wall
    assert wall.character is level.player
    assert wall.base_texture == "#"


def test_place_character_outside_is_ignored():
    level = Level()
    start = level.player.tile
    level.place_character(level.player, 99, 99)
    assert level.player.tile is start
    assert start.character is level.player


def test_unknown_symbols_become_floor():
    level = Level(["####", "#?.#", "#..#", "####"])
    tile = level.tile_at(1, 1)
    assert isinstance(tile, Floor)
    assert tile.base_texture == "."
    assert (tile.row, tile.column) == (1, 1)


def test_custom_layout_without_start_tile_leaves_player_unplaced():
    level = Level(["..", ".."])
    assert level.player.tile is None


def test_ragged_layout_rejected():
    with pytest.raises(ValueError):
        Level(["###", "##"])


def test_empty_layout_rejected():
    with pytest.raises(ValueError):
        Level([])


def test_unpaired_portal_rejected():
    with pytest.raises(ValueError):
        Level(["####", "#O.#", "#..#", "####"])