import pytest

from ringrun.grid import Cell
from ringrun.levels import Collectible, EnemyKind, EnemySpawn, Level


class TinyLevel(Level):
    num_enemies = 1
    level_time = 60.0
    num_rings = 2

    def __init__(self):
        super().__init__(2, 20, 14, 1.0, 0.9, 100, 50)
        self.builds = 0

    def build_obstacles(self):
        self.builds += 1
        for col in range(self.cells_x):
            self.obstacles.place(11, col, Cell.WALL)

    def build_collectibles(self):
        self.place_collectible(10, 3, Collectible.RING)
        self.place_collectible(10, 4, Collectible.RING)
        self.place_collectible(9, 5, Collectible.HEALTH)
        self.place_collectible(9, 6, Collectible.BOOST)

    def enemy_spawns(self):
        return [EnemySpawn(EnemyKind.MOTOBUG, 500.0, 600.0)]


@pytest.fixture
def level():
    return TinyLevel()


def test_level_is_abstract():
    with pytest.raises(TypeError):
        Level(1, 10, 10, 1.0, 1.0, 0, 0)


def test_build_runs_once(level):
    Level.build(level)
    level.build()
    assert level.builds == 1
    assert level.level_init is True
    assert level.enemies == [EnemySpawn(EnemyKind.MOTOBUG, 500.0, 600.0)]


def test_dimensions_and_backgrounds(level):
    Level.build(level)
    assert level.width == 20 * 64
    assert level.height == 14 * 64
    assert level.background_spans == [(0.0, 1200.0), (1200.0, 2400.0)]
    assert level.obstacles.check(11, 0, Cell.WALL) is True


def test_switch_active_player_cycles(level):
    Level.build(level)
    assert level.player_activity == [True, False, False]
    assert Level.switch_active_player(level) == 1
    assert level.player_activity == [False, True, False]
    Level.switch_active_player(level)
    assert Level.switch_active_player(level) == 0
    assert level.player_activity == [True, False, False]


def test_is_lost_conditions(level):
    Level.build(level)
    assert Level.is_lost(level, 10.0, False) is False
    assert level.lost is False
    assert Level.is_lost(level, level.level_time + 0.5, False) is True
    assert Level.is_lost(level, 10.0, True) is True
    for _ in range(3):
        Level.take_damage(level)
    assert level.team_health == 0
    assert Level.is_lost(level, 10.0, False) is True


def test_is_won_requires_everything(level):
    Level.build(level)
    end_x = level.width - 600.0 + 1
    assert Level.is_won(level, end_x) is False
    Level.defeat_enemy(level)
    assert Level.is_won(level, end_x) is False
    Level.collect(level, 10, 3)
    Level.collect(level, 10, 4)
    assert Level.is_won(level, level.width - 600.0) is False
    assert Level.is_won(level, end_x) is True
    assert level.won is True


def test_collect_applies_effects(level):
    Level.build(level)
    health = level.team_health
    assert Level.collect(level, 9, 5) is Collectible.HEALTH
    assert level.team_health == health + 1
    assert Level.collect(level, 9, 6) is Collectible.BOOST
    assert Level.collect(level, 10, 3) is Collectible.RING
    assert level.collected_rings == 1
    assert level.collectible(10, 3) is None
    assert Level.collect(level, 10, 3) is None
    assert level.collected_rings == 1


def test_collectible_cells_lists_placed_items(level):
    Level.build(level)
    cells = set(level.collectible_cells())
    assert (10, 3, Collectible.RING) in cells
    assert (9, 6, Collectible.BOOST) in cells
    assert len(cells) == 4


def test_collect_out_of_bounds(level):
    Level.build(level)
    with pytest.raises(IndexError):
        Level.collect(level, 14, 0)
    with pytest.raises(IndexError):
        level.place_collectible(0, 20, Collectible.RING)


def test_score(level):
    Level.build(level)
    assert Level.score(level) == 0
    Level.defeat_enemy(level)
    assert Level.score(level) == 200
    Level.collect(level, 10, 3)
    assert Level.score(level) == 250
    assert level.total_score == level.highscore + level.level_score