"""The first level: the labyrinth."""

from __future__ import annotations

from .grid import Cell
from .levels import Collectible, EnemyKind, EnemySpawn, Level

_SPAWNS = (
    EnemySpawn(EnemyKind.CRABMEAT, 1856.0, 256.0),
    EnemySpawn(EnemyKind.BATBRAIN, 300.0, 768.0),
    EnemySpawn(EnemyKind.BEEBOT, 4800.0, 400.0),
    EnemySpawn(EnemyKind.MOTOBUG, 7040.0, 600.0),
    EnemySpawn(EnemyKind.CRABMEAT, 8448.0, 600.0),
    EnemySpawn(EnemyKind.BEEBOT, 8192.0, 200.0),
    EnemySpawn(EnemyKind.CRABMEAT, 9600.0, 600.0),
    EnemySpawn(EnemyKind.BATBRAIN, 9800.0, 600.0),
    EnemySpawn(EnemyKind.MOTOBUG, 10500.0, 600.0),
)


class Level1(Level):
    """Eleven screens of brick corridors, with pits, spikes and breakable walls."""

    def __init__(self, volume: int, highscore: int) -> None:
        super().__init__(11, 200, 14, 1.0, 0.95, highscore, volume)
        self.num_enemies = len(_SPAWNS)
        self.level_time = 300.0
        self.num_rings = 24
        self.num_lives = 2
        self.num_boosts = 1

    def _fill(self, rows, cols, kind: Cell) -> None:
        for row in rows:
            for col in cols:
                self.obstacles.place(row, col, kind)

    def build_obstacles(self) -> None:
        """Lay out the ceiling, floor with its pits, and the obstacle sections."""
        self._fill([0], range(200), Cell.WALL)
        pits = {12, 13, *range(43, 61)}
        for col in range(200):
            if col in pits:
                self.obstacles.place(12, col, Cell.PIT)
            else:
                self.obstacles.place(11, col, Cell.WALL)

        # first ledge, carrying rings
        self._fill([8], range(14, 20), Cell.WALL)
        # large block of wall with a breakable passage above it
        self._fill(range(10, 4, -1), range(22, 43), Cell.WALL)
        self._fill(range(4, 1, -1), range(34, 37), Cell.BREAKABLE)

        # climbing platforms hiding the boost
        self._fill([8], range(65, 70), Cell.PLATFORM)
        self._fill([5], range(70, 78), Cell.WALL)

        self._fill([10], range(80, 83), Cell.SPIKE)

        # L-shaped trap
        self._fill(range(11, 8, -1), [91], Cell.WALL)
        self._fill([8], range(87, 92), Cell.PLATFORM)
        self._fill(range(8, 0, -1), [87], Cell.WALL)

        # climb back to the ground past traps and enemies
        self._fill([8], range(105, 110), Cell.WALL)
        self._fill([6], range(112, 142), Cell.WALL)
        self._fill(range(11, 6, -1), [141], Cell.WALL)
        self._fill(range(5, 0, -1), [141], Cell.BREAKABLE)
        self.obstacles.place(5, 120, Cell.SPIKE)
        self.obstacles.place(5, 125, Cell.SPIKE)

        self._fill(range(10, 7, -1), [170], Cell.WALL)
        self._fill(range(4, 0, -1), [170], Cell.WALL)

    def build_collectibles(self) -> None:
        """Place the level's rings, health pick-ups and boost."""
        for col in range(14, 20):
            self.place_collectible(7, col, Collectible.RING)
        self.place_collectible(4, 32, Collectible.HEALTH)
        for col in range(37, 40):
            self.place_collectible(4, col, Collectible.RING)
        self.place_collectible(4, 73, Collectible.BOOST)
        self.place_collectible(7, 100, Collectible.HEALTH)
        for col in range(135, 141):
            self.place_collectible(10, col, Collectible.RING)
        for col in range(121, 125):
            self.place_collectible(5, col, Collectible.RING)
        for col in range(145, 150):
            self.place_collectible(7, col, Collectible.RING)

    def enemy_spawns(self) -> tuple[EnemySpawn, ...]:
        """The level's enemies, in spawn order."""
        return _SPAWNS