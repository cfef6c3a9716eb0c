"""Ordered shell environment: variables with optional values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class EnvEntry:
    """One environment variable; ``value`` is None when it was never assigned."""

    key: str
    value: str | None = None

    def __str__(self) -> str:
        return self.key if self.value is None else f"{self.key}={self.value}"


def _split_assignment(text: str) -> tuple[str, str | None]:
    key, sep, value = text.partition("=")
    return key, (value if sep else None)


class Environment:
    """An ordered list of variables, searched front to back by key."""

    def __init__(self, entries: Iterable[EnvEntry] = ()) -> None:
        self._entries: list[EnvEntry] = list(entries)

    @classmethod
    def from_strings(cls, envp: Iterable[str]) -> Environment:
        """Build an environment from ``KEY=VALUE`` strings, keeping their order."""
        env = cls()
        for env_str in envp:
            env.parse_and_append(env_str)
        return env

    def _find(self, key: str) -> EnvEntry | None:
        return next((entry for entry in self._entries if entry.key == key), None)

    def get(self, key: str) -> str | None:
        """Return the value of the first variable named ``key``, or None."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def set(self, key: str, value: str | None) -> None:
        """Assign ``value`` to ``key``, appending a new variable if it is absent."""
        entry = self._find(key)
        if entry is None:
            self.append(key, value)
        else:
            entry.value = value

    def add_or_update(self, arg: str) -> None:
        """Apply an ``export``-style argument ``KEY`` or ``KEY=VALUE``.

        An existing variable takes the new value (None when there is no '=');
        a new variable is placed at the front.
        """
        key, value = _split_assignment(arg)
        entry = self._find(key)
        if entry is None:
            self._entries.insert(0, EnvEntry(key, value))
        else:
            entry.value = value

    def append(self, key: str, value: str | None) -> None:
        """Add a variable at the end without looking for an existing one."""
        self._entries.append(EnvEntry(key, value))

    def parse_and_append(self, env_str: str) -> None:
        """Split ``env_str`` at its first '=' and append the result."""
        key, value = _split_assignment(env_str)
        self.append(key, value)

    def remove(self, key: str) -> bool:
        """Remove the first variable named ``key``; return whether one was found."""
        for index, entry in enumerate(self._entries):
            if entry.key == key:
                del self._entries[index]
                return True
        return False

    def to_strings(self) -> list[str]:
        """Render every variable as ``KEY=VALUE``, or ``KEY`` when unassigned."""
        return [str(entry) for entry in self._entries]

    def __iter__(self) -> Iterator[EnvEntry]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"