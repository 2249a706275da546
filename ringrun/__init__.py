"""Rules for a tile-based side-scroller: grids, players, an enemy, levels, menu and leaderboard."""

__version__ = "0.1.0"

__all__ = [
    "grid",
    "timing",
    "scoreboard",
    "menu",
    "motobug",
    "players",
    "levels",
    "level1",
    "level2",
    "level3",
]