"""Name entry and the persistent high-score table."""

from __future__ import annotations

from pathlib import Path
from typing import Union

MAX_NAME_LENGTH = 15
MAX_ENTRIES = 50
DEFAULT_TOP = 10


class NameEntry:
    """Collects a player name typed one character at a time."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def add(self, char: str) -> None:
        """Append a typed character; a backspace deletes the last one instead."""
        if len(char) != 1:
            raise ValueError("exactly one character is expected")
        if char == "\b":
            self.backspace()
        elif len(self._chars) < MAX_NAME_LENGTH:
            self._chars.append(char)

    def backspace(self) -> None:
        """Delete the last character, if any."""
        if self._chars:
            self._chars.pop()


class Scoreboard:
    """High scores stored as 'name score' pairs in a text file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> list[tuple[str, int]]:
        """Read up to MAX_ENTRIES pairs, stopping at the first malformed one."""
        try:
            tokens = self.path.read_text(encoding="utf-8").split()
        except FileNotFoundError:
            return []
        entries: list[tuple[str, int]] = []
        for name, raw in zip(tokens[::2], tokens[1::2]):
            if len(entries) >= MAX_ENTRIES:
                break
            try:
                entries.append((name, int(raw)))
            except ValueError:
                break
        return entries

    def record(self, name: str, score: int) -> None:
        """Add a score, or raise an existing player's score if the new one is higher."""
        if not name or any(ch.isspace() for ch in name):
            raise ValueError("name must be non-empty and contain no whitespace")
        entries = self.load()
        found = False
        for i, (existing, old) in enumerate(entries):
            if existing == name:
                found = True
                if old < score:
                    entries[i] = (existing, score)
                    break
        if found:
            self.path.write_text(
                "".join(f"{n} {s}\n" for n, s in entries), encoding="utf-8"
            )
        else:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(f"{name} {score}\n")

    def top(self, count: int = DEFAULT_TOP) -> list[tuple[str, int]]:
        """Return the highest scores, best first; ties keep file order."""
        ranked = sorted(self.load(), key=lambda entry: -entry[1])
        return ranked[:count]