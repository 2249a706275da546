"""The third level: the moon base."""

from __future__ import annotations

from .grid import Cell
from .levels import Collectible, EnemyKind, EnemySpawn, Level

_SPAWNS = (
    EnemySpawn(EnemyKind.CRABMEAT, 300.0, 600.0),
    EnemySpawn(EnemyKind.BEEBOT, 1200.0, 400.0),
    EnemySpawn(EnemyKind.MOTOBUG, 2400.0, 600.0),
    EnemySpawn(EnemyKind.BATBRAIN, 5888.0, 128.0),
    EnemySpawn(EnemyKind.CRABMEAT, 10240.0, 600.0),
    EnemySpawn(EnemyKind.BEEBOT, 10500.0, 400.0),
    EnemySpawn(EnemyKind.BATBRAIN, 11520.0, 300.0),
    EnemySpawn(EnemyKind.CRABMEAT, 14000.0, 600.0),
)


class Level3(Level):
    """Sixteen screens of moon rock under low gravity, with pits and a spiked tunnel."""

    def __init__(self, volume: int, highscore: int) -> None:
        super().__init__(16, 300, 14, 0.5, 0.95, highscore, volume)
        self.num_enemies = len(_SPAWNS)
        self.level_time = 180.0
        self.num_rings = 25
        self.num_lives = 3
        self.num_boosts = 2
        self.team_health = 7

    def _fill(self, rows, cols, kind: Cell) -> None:
        for row in rows:
            for col in cols:
                self.obstacles.place(row, col, kind)

    def build_obstacles(self) -> None:
        """Lay out the ceiling, floor with its pits, and the obstacle sections."""
        self._fill([0], range(300), Cell.WALL)
        pits = {26, 29, *range(46, 74)}
        for col in range(300):
            if col in pits:
                self.obstacles.place(12, col, Cell.PIT)
            else:
                self.obstacles.place(11, col, Cell.WALL)

        # stepped ledges near the start, the upper one holding a boost
        self._fill([8], range(12, 20), Cell.WALL)
        self._fill([5], range(15, 18), Cell.WALL)

        self.obstacles.place(10, 31, Cell.SPIKE)
        self.obstacles.place(10, 38, Cell.SPIKE)

        # breakable gate in front of the long pit
        for row in range(10, 7, -1):
            self.obstacles.place(row, 42, Cell.BREAKABLE)
            self.obstacles.place(row, 43, Cell.BREAKABLE)
            self.obstacles.place(row, 45, Cell.BREAKABLE)
            self.obstacles.place(row, 46, Cell.WALL)
        self._fill(range(7, 0, -1), [45], Cell.BREAKABLE)
        self._fill([7], range(42, 45), Cell.WALL)

        self._fill([10], range(46, 74), Cell.PIT)

        # raised block with a hollowed-out pocket at its far end
        self._fill(range(10, 4, -1), range(75, 100), Cell.WALL)
        self.obstacles.place(4, 78, Cell.SPIKE)
        self._fill(range(4, 0, -1), [99], Cell.WALL)
        self._fill(range(10, 4, -1), [93, 94], Cell.EMPTY)
        for col in range(95, 100):
            self._fill([10, 9, 8], [col], Cell.EMPTY)

        # low tunnel lined with spikes
        self._fill([4], range(100, 200), Cell.WALL)
        self._fill([10], range(120, 180, 4), Cell.SPIKE)
        self._fill(range(10, 4, -1), [200], Cell.BREAKABLE)

    def build_collectibles(self) -> None:
        """Place the level's rings, health pick-ups and boosts."""
        for col in range(32, 38):
            self.place_collectible(10, col, Collectible.RING)
        self.place_collectible(4, 16, Collectible.BOOST)
        self.place_collectible(10, 44, Collectible.HEALTH)
        self.place_collectible(10, 162, Collectible.HEALTH)
        for col in range(80, 89):
            self.place_collectible(4, col, Collectible.RING)
        self.place_collectible(10, 150, Collectible.BOOST)
        for col in range(190, 200):
            self.place_collectible(10, col, Collectible.RING)

    def enemy_spawns(self) -> tuple[EnemySpawn, ...]:
        """The level's enemies, in spawn order."""
        return _SPAWNS