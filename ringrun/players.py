"""Playable characters: shared movement physics, Sonic and Tails."""

from __future__ import annotations

import math
from typing import NamedTuple

from .grid import Cell, ObstacleGrid

CELL_SIZE = 64
START_Y = 560.0
JUMP_STRENGTH = -22.0
INVINCIBILITY_TIME = 1.0

_SOLID = frozenset({Cell.WALL, Cell.SPIKE, Cell.PLATFORM})


def _cell_index(coordinate: float, cell_size: int) -> int:
    """Cell index of a pixel coordinate, truncating towards zero."""
    return int(math.trunc(coordinate) / cell_size)


class GravityStep(NamedTuple):
    """Outcome of one gravity step."""

    player_y: float
    velocity_y: float
    on_ground: bool


def player_gravity(
    grid: ObstacleGrid,
    player_x: float,
    player_y: float,
    velocity_y: float,
    gravity: float,
    terminal_velocity: float,
    hitbox_x: int,
    hitbox_y: int,
    height: int,
    width: int,
    cell_size: int,
) -> GravityStep:
    """Apply one frame of gravity against the walls of the grid.

    The three cells under the hitbox's bottom edge are probed at the spot the
    player would fall to; if any is a wall the player stands still.
    """
    offset_y = player_y + velocity_y
    row = _cell_index(offset_y + hitbox_y + height, cell_size)
    columns = (
        _cell_index(player_x + hitbox_x, cell_size),
        _cell_index(player_x + hitbox_x + width, cell_size),
        _cell_index(player_x + hitbox_x + width // 2, cell_size),
    )
    on_ground = any(grid.cell(row, col) is Cell.WALL for col in columns)
    if on_ground:
        return GravityStep(player_y, 0.0, True)
    velocity_y = min(velocity_y + gravity, terminal_velocity)
    return GravityStep(offset_y, velocity_y, False)


class Player:
    """State and physics common to every playable character."""

    roll_speed = 0.0
    follow_speed = 0.0
    turns_to_face = True

    def __init__(
        self,
        max_velocity_x: float,
        max_velocity_y: float,
        acceleration: float,
        scale_x: float,
        scale_y: float,
        image_x: float,
        image_y: float,
    ) -> None:
        self.x = 0.0
        self.y = START_Y
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.max_velocity_x = max_velocity_x
        self.terminal_velocity = max_velocity_y
        self.acceleration = acceleration
        self.gravity = 0.0
        self.friction = 0.0
        self.deceleration = 0.0
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.width = image_x * scale_x
        self.height = image_y * scale_y
        self.hitbox_x = 8 * scale_x
        self.hitbox_y = 5 * scale_y
        self.jump_strength = JUMP_STRENGTH
        self.invincible = False
        self.invincibility_time = INVINCIBILITY_TIME
        self.on_ground = True
        self.on_spike = False
        self.can_move_left = True
        self.can_move_right = True
        self.can_move_up = True
        self.active = False
        self.is_flying = False
        self.facing_left = False
        self.facing_right = True
        self.fell_in_pit = False
        self.boost_active = False

    def set_modifiers(self, gravity: float, friction: float) -> None:
        """Set the level's gravity and friction; deceleration follows from them."""
        self.gravity = gravity
        self.friction = friction
        self.deceleration = self.acceleration * friction

    @property
    def rolling(self) -> bool:
        """Rolling at top speed on the ground, or curled up mid-jump."""
        if self.is_flying:
            return False
        if abs(self.velocity_x) >= self.roll_speed:
            return True
        return abs(self.velocity_y) > 1 and not self.on_ground

    def ground_below(self, grid: ObstacleGrid) -> bool:
        """Apply one frame of gravity and report whether the player stands on something."""
        offset_y = self.y if self.on_ground else self.y + self.velocity_y
        row = _cell_index(offset_y + self.hitbox_y + self.height, CELL_SIZE)
        columns = (
            _cell_index(self.x + self.hitbox_x, CELL_SIZE),
            _cell_index(self.x + self.width, CELL_SIZE),
            _cell_index(self.x + self.width / 2, CELL_SIZE),
        )
        below = [grid.cell(row, col) for col in columns]
        self.on_spike = Cell.SPIKE in below
        if any(cell in _SOLID for cell in below):
            self.on_ground = True
            self.velocity_y = 0.0
        else:
            if self.velocity_y < 0 and not self.can_move_up:
                self.velocity_y = 0.0
            self.y = offset_y
            self.on_ground = False
            self.velocity_y = min(self.velocity_y + self.gravity, self.terminal_velocity)
        return self.on_ground

    def apply_horizontal(self, dt: float, direction: int) -> float:
        """Accelerate right (1), left (-1) or coast (0), then move; returns the new x."""
        if direction not in (-1, 0, 1):
            raise ValueError("direction must be -1, 0 or 1")
        if direction == 1 and self.can_move_right:
            if self.turns_to_face:
                self.facing_right, self.facing_left = True, False
            self.velocity_x = min(
                self.velocity_x + self.acceleration * dt, self.max_velocity_x
            )
        elif direction == -1 and self.can_move_left:
            if self.turns_to_face:
                self.facing_right, self.facing_left = False, True
            self.velocity_x = max(
                self.velocity_x - self.acceleration * dt, -self.max_velocity_x
            )
        elif self.velocity_x < 0:
            self.velocity_x = min(self.velocity_x + self.deceleration * dt, 0.0)
        elif self.velocity_x > 0:
            self.velocity_x = max(self.velocity_x - self.deceleration * dt, 0.0)
        self.x = max(self.x + self.velocity_x * dt, 0.0)
        return self.x

    def jump(self) -> None:
        """Launch upwards with the jump strength."""
        self.velocity_y = self.jump_strength

    def move_to_target(self, target_x: float, dt: float, target_y: float) -> None:
        """Step horizontally towards target_x at the follow speed."""
        step = self.follow_speed * dt
        self.x += -step if target_x < self.x else step

    def activate_boost(self) -> None:
        """Mark the character's boost as used."""
        self.boost_active = True

    def refresh_invincibility(self, elapsed: float) -> bool:
        """End invincibility once elapsed seconds exceed its duration; return the status."""
        if self.invincible and elapsed > self.invincibility_time:
            self.invincible = False
        return self.invincible


class Sonic(Player):
    """The fast runner; leads the team at the start."""

    roll_speed = 900.0
    follow_speed = 900.0
    follow_speed_y = 300.0
    boost_speed = 400.0

    def __init__(self) -> None:
        super().__init__(900.0, 640.0, 900.0, 2.5, 2.5, 24, 35)
        self.active = True

    def move_to_target(self, target_x: float, dt: float, target_y: float) -> None:
        """Follow horizontally, and vertically too while carried in flight."""
        super().move_to_target(target_x, dt, target_y)
        if self.is_flying:
            step = self.follow_speed_y * dt
            self.y += step if self.y < target_y else -step

    def activate_boost(self) -> None:
        """Raise the top running speed."""
        self.max_velocity_x += self.boost_speed
        super().activate_boost()


class Tails(Player):
    """The flyer; can carry the team through the air for a limited time."""

    roll_speed = 500.0
    follow_speed = 930.0
    turns_to_face = False

    def __init__(self) -> None:
        super().__init__(500.0, 640.0, 900.0, 3.0, 3.0, 24, 35)
        self.fly_time = 7

    def move_to_target(self, target_x: float, dt: float, target_y: float) -> None:
        """Follow horizontally only, even while flying."""
        super().move_to_target(target_x, dt, target_y)

    def fly(self, dt: float, elapsed: float) -> bool:
        """Advance one frame of flight; returns True when the flight has just ended.

        ``elapsed`` is the time spent flying; once it passes the fly time the
        climb fades out and flight stops.
        """
        self.velocity_y += self.jump_strength * dt * 3.0
        ended = False
        if elapsed > self.fly_time:
            self.velocity_y -= self.gravity
            if self.velocity_y <= 0:
                self.velocity_y = 0.0
                self.is_flying = False
                ended = True
        self.y += self.velocity_y * dt
        if self.velocity_y < 0 and not self.can_move_up:
            self.velocity_y = 0.0
        return ended

    def activate_boost(self) -> None:
        """Lengthen the time Tails can stay airborne."""
        self.fly_time += 4
        super().activate_boost()