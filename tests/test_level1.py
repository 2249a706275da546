import pytest

from ringrun.grid import Cell
from ringrun.level1 import Level1
from ringrun.levels import Collectible, EnemyKind, EnemySpawn


@pytest.fixture
def level():
    lvl = Level1(40, 1000)
    lvl.build()
    return lvl


def test_settings():
    lvl = Level1(40, 1000)
    assert lvl.level_time == 300.0
    assert lvl.num_rings == 24
    assert lvl.num_enemies == 9
    assert lvl.gravity == 1.0
    assert lvl.friction == 0.95
    assert lvl.width == 200 * 64
    assert lvl.background_count == 11
    assert lvl.highscore == 1000
    assert lvl.volume == 40


def test_ring_count_matches_target(level):
    rings = [c for c in level.collectible_cells() if c[2] is Collectible.RING]
    assert len(rings) == level.num_rings


def test_health_and_boost_positions(level):
    assert level.collectible(4, 32) is Collectible.HEALTH
    assert level.collectible(7, 100) is Collectible.HEALTH
    assert level.collectible(4, 73) is Collectible.BOOST
    assert level.collectible(4, 16) is None


def test_ceiling_and_floor(level):
    assert all(level.obstacles.check(0, col, Cell.WALL) for col in range(200))
    assert level.obstacles.check(11, 11, Cell.WALL)
    assert level.obstacles.check(12, 12, Cell.PIT)
    assert level.obstacles.check(11, 12, Cell.EMPTY)
    assert level.obstacles.check(12, 50, Cell.PIT)
    assert level.obstacles.check(11, 61, Cell.WALL)


def test_obstacle_sections(level):
    assert all(
        level.obstacles.check(row, col, Cell.BREAKABLE)
        for row in range(2, 5)
        for col in range(34, 37)
    )
    assert all(level.obstacles.check(10, col, Cell.SPIKE) for col in range(80, 83))
    assert level.obstacles.check(8, 65, Cell.PLATFORM)
    assert level.obstacles.check(5, 120, Cell.SPIKE)
    assert level.obstacles.check(3, 141, Cell.BREAKABLE)
    assert level.obstacles.check(6, 170, Cell.EMPTY)


def test_enemy_spawns(level):
    assert len(level.enemies) == level.num_enemies
    assert level.enemies[0] == EnemySpawn(EnemyKind.CRABMEAT, 1856.0, 256.0)
    assert level.enemies[-1] == EnemySpawn(EnemyKind.MOTOBUG, 10500.0, 600.0)


def test_full_clear_wins(level):
    for row, col, _ in list(level.collectible_cells()):
        level.collect(row, col)
    for _ in level.enemies:
        level.defeat_enemy()
    assert level.collected_rings == level.num_rings
    assert level.is_won(level.width - 600.0 + 10) is True
    assert level.is_won(100.0) is False


def test_time_limit(level):
    assert level.is_lost(299.0, False) is False
    assert level.is_lost(300.5, False) is True