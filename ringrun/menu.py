"""Main menu navigation."""

from __future__ import annotations

from enum import Enum


class MenuOption(Enum):
    """Entries of the main menu, in display order."""

    NEW_GAME = "New Game"
    OPTIONS = "Options"
    INSTRUCTIONS = "Instructions"
    CONTINUE = "Continue"
    LEADERBOARD = "Leaderboard"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        return self.value


_OPTIONS = tuple(MenuOption)


class Menu:
    """Cursor over the menu options, wrapping at both ends."""

    def __init__(self) -> None:
        self.index = 0

    @property
    def options(self) -> tuple[MenuOption, ...]:
        return _OPTIONS

    @property
    def highlighted(self) -> MenuOption:
        return _OPTIONS[self.index]

    def move_down(self) -> MenuOption:
        self.index = (self.index + 1) % len(_OPTIONS)
        return self.highlighted

    def move_up(self) -> MenuOption:
        self.index = (self.index - 1) % len(_OPTIONS)
        return self.highlighted

    def select(self) -> MenuOption:
        """Return the option chosen with the cursor where it is."""
        return self.highlighted