"""The MotoBug crawler enemy."""

from __future__ import annotations

CHASE_RANGE = 600.0


class MotoBug:
    """A ground enemy that rolls towards the player once within range."""

    shoots_projectiles = False

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.speed_x = 100.0
        self.active = True

    def move(self, dt: float, target_x: float) -> None:
        """Step towards target_x unless it lies more than the chase range ahead."""
        if target_x - self.x <= CHASE_RANGE:
            if target_x < self.x:
                self.x -= self.speed_x * dt
            elif target_x > self.x:
                self.x += self.speed_x * dt

    def update(self, dt: float, target_x: float) -> None:
        """Advance one frame of behaviour."""
        self.move(dt, target_x)