from __future__ import annotations


class WorldItemsError(Exception):
    """Base exception for the world-items project."""


class ConfigError(WorldItemsError):
    """Raised when a scan configuration file is malformed."""


class UnknownItemError(WorldItemsError, KeyError):
    """Raised when an item factory is asked for an id it does not know."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable.
        return str(self.args[0]) if self.args else ""


class SnapshotError(WorldItemsError):
    """Raised when a world snapshot cannot be loaded or fails validation."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in e.path) or "<root>"
            parts.append(f" - at {path}: {e.message}")
        return "\n".join(parts)
