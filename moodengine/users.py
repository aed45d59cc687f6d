"""Flat-file store of known users, one ``id|name|role`` record per line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class User:
    """A known person."""

    id: int
    name: str
    role: str


class UserStore:
    """Reads and appends user records in a text file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def find(self, user_id: int) -> User:
        """Return the first user with ``user_id``; KeyError if there is none."""
        with self.path.open("r", encoding="utf-8", newline="") as handle:
            for raw in handle:
                line = raw[:-1] if raw.endswith("\n") else raw
                head, bar, rest = line.partition("|")
                if _to_int(head if bar else line) != user_id:
                    continue
                data = rest if bar else line
                name, sep, role = data.partition("|")
                if not sep:
                    role = data
                return User(user_id, name, role)
        raise KeyError(f"user {user_id} not found")

    def add(self, user: User) -> None:
        """Append a user record, creating the file if needed."""
        with self.path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(f"{user.id}|{user.name}|{user.role}\n")