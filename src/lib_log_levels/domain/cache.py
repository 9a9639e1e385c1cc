"""Memo of resolved levels keyed by logger name.

The cache is derived data only. It is never partially invalidated: the engine
installs a new, empty instance whenever a new specification is activated and
calls :meth:`LevelCache.clear_all` on the outgoing one, so a cached value always
belongs to the configuration it was computed from.
"""

from __future__ import annotations

from typing import Iterator

from .levels import LogLevel


class LevelCache:
    """Dictionary-backed cache of ``logger name -> LogLevel``.

    Single ``dict`` reads and writes are atomic in CPython, so lookups do not
    take a lock. Two threads missing on the same name may both store a value;
    both values come from the same configuration and are equal.

    Examples
    --------
    >>> cache = LevelCache()
    >>> cache.get("app") is None
    True
    >>> cache.put("app", LogLevel.DEBUG)
    >>> cache.get("app") is LogLevel.DEBUG, len(cache)
    (True, 1)
    >>> cache.clear_all()
    >>> "app" in cache
    False
    """

    __slots__ = ("_levels",)

    def __init__(self) -> None:
        self._levels: dict[str, LogLevel] = {}

    def get(self, logger_name: str) -> LogLevel | None:
        """Return the cached level or ``None`` on a miss."""
        return self._levels.get(logger_name)

    def put(self, logger_name: str, level: LogLevel) -> None:
        """Store ``level`` for ``logger_name``, replacing any previous value."""
        self._levels[logger_name] = level

    def clear_all(self) -> None:
        """Forget every cached resolution."""
        self._levels.clear()

    def __contains__(self, logger_name: object) -> bool:
        return logger_name in self._levels

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._levels))


__all__ = ["LevelCache"]
