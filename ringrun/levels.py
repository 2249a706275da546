"""Shared level state: tile layout, collectibles, enemies, team status and scoring."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .grid import ObstacleGrid

CELL_SIZE = 64
BACKGROUND_WIDTH = 1200
FINISH_MARGIN = 600.0
TEAM_SIZE = 3
DEFAULT_TEAM_HEALTH = 3
ENEMY_POINTS = 200
RING_POINTS = 50


class Collectible(str, Enum):
    """Items that can be picked up from a level's cells."""

    RING = "r"
    HEALTH = "h"
    BOOST = "b"


class EnemyKind(Enum):
    """The kinds of enemy a level can spawn."""

    CRABMEAT = "crabmeat"
    BATBRAIN = "batbrain"
    BEEBOT = "beebot"
    MOTOBUG = "motobug"


@dataclass(frozen=True)
class EnemySpawn:
    """Where an enemy of a given kind starts, in world pixels."""

    kind: EnemyKind
    x: float
    y: float


class Level(ABC):
    """A playable level: its layout plus the running state of the team in it."""

    num_enemies = 0
    level_time = 0.0
    num_rings = 0
    num_lives = 0
    num_boosts = 0

    def __init__(
        self,
        background_count: int,
        cells_x: int,
        cells_y: int,
        gravity: float,
        friction: float,
        highscore: int,
        volume: int,
    ) -> None:
        self.background_count = background_count
        self.obstacles = ObstacleGrid(cells_x, cells_y)
        self._collectibles: list[list[Optional[Collectible]]] = [
            [None] * cells_x for _ in range(cells_y)
        ]
        self.cells_x = cells_x
        self.cells_y = cells_y
        self.width = cells_x * CELL_SIZE
        self.height = cells_y * CELL_SIZE
        self.gravity = gravity
        self.friction = friction
        self.highscore = highscore
        self.volume = volume
        self.level_score = 0
        self.level_init = False
        self.enemies: list[EnemySpawn] = []
        self.defeated_enemies = 0
        self.collected_rings = 0
        self.team_health = DEFAULT_TEAM_HEALTH
        self.active_player_index = 0
        self.player_activity = [True] + [False] * (TEAM_SIZE - 1)
        self.lost = False
        self.won = False

    @property
    def background_spans(self) -> list[tuple[float, float]]:
        """Left and right world edges of each background panel."""
        return [
            (float(BACKGROUND_WIDTH * i), float(BACKGROUND_WIDTH * (i + 1)))
            for i in range(self.background_count)
        ]

    def build(self) -> None:
        """Lay out collectibles, obstacles and enemies, once."""
        if self.level_init:
            return
        self.build_collectibles()
        self.build_obstacles()
        self.enemies = list(self.enemy_spawns())
        self.level_init = True

    @abstractmethod
    def build_obstacles(self) -> None:
        """Fill the obstacle grid with this level's layout."""

    @abstractmethod
    def build_collectibles(self) -> None:
        """Place this level's rings, health and boosts."""

    @abstractmethod
    def enemy_spawns(self) -> Iterable[EnemySpawn]:
        """Return the enemies this level starts with."""

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.cells_y and 0 <= col < self.cells_x):
            raise IndexError(f"cell ({row}, {col}) is outside the level")

    def place_collectible(self, row: int, col: int, kind: Collectible) -> None:
        """Put a collectible in a cell, replacing what was there."""
        self._check_bounds(row, col)
        self._collectibles[row][col] = Collectible(kind)

    def collectible(self, row: int, col: int) -> Optional[Collectible]:
        """Return the collectible in a cell, or None if it is empty."""
        self._check_bounds(row, col)
        return self._collectibles[row][col]

    def collectible_cells(self) -> Iterator[tuple[int, int, Collectible]]:
        """Yield (row, col, kind) for every cell holding a collectible."""
        for row, cells in enumerate(self._collectibles):
            for col, kind in enumerate(cells):
                if kind is not None:
                    yield row, col, kind

    def is_lost(self, total_time: float, fell_in_pit: bool) -> bool:
        """Lost when time runs out, the team's health is gone or the leader fell in a pit."""
        self.lost = (
            total_time > self.level_time or self.team_health <= 0 or fell_in_pit
        )
        return self.lost

    def is_won(self, active_x: float) -> bool:
        """Won when every enemy is beaten, every ring taken and the leader is at the end."""
        self.won = (
            self.defeated_enemies == self.num_enemies
            and self.collected_rings == self.num_rings
            and active_x > self.width - FINISH_MARGIN
        )
        return self.won

    def switch_active_player(self) -> int:
        """Hand control to the next team member; returns its index."""
        self.active_player_index = (self.active_player_index + 1) % TEAM_SIZE
        self.player_activity = [
            i == self.active_player_index for i in range(TEAM_SIZE)
        ]
        return self.active_player_index

    def take_damage(self) -> int:
        """Lose one point of team health; returns what is left."""
        self.team_health -= 1
        return self.team_health

    def defeat_enemy(self) -> int:
        """Count one more enemy beaten; returns the total."""
        self.defeated_enemies += 1
        return self.defeated_enemies

    def collect(self, row: int, col: int) -> Optional[Collectible]:
        """Pick up whatever lies in a cell and apply its effect; returns what was taken."""
        kind = self.collectible(row, col)
        if kind is None:
            return None
        self._collectibles[row][col] = None
        if kind is Collectible.RING:
            self.collected_rings += 1
        elif kind is Collectible.HEALTH:
            self.team_health += 1
        return kind

    def score(self) -> int:
        """Recompute and return the points earned in this level."""
        self.level_score = (
            self.defeated_enemies * ENEMY_POINTS + self.collected_rings * RING_POINTS
        )
        return self.level_score

    @property
    def total_score(self) -> int:
        """The carried-over high score plus this level's points."""
        return self.highscore + self.score()