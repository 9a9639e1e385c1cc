"""Level source port consumed by emit-side adapters.

Purpose
-------
Let adapters ask "should this record be emitted?" without depending on the
concrete :class:`~lib_log_levels.module_levels.ModuleLevels` engine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_levels.domain.levels import LogLevel


@runtime_checkable
class LevelSourcePort(Protocol):
    """Resolve the effective level of a named logger."""

    def level(self, logger_name: str) -> LogLevel:
        """Return the threshold that applies to ``logger_name``."""

    def is_enabled(self, logger_name: str, level: LogLevel) -> bool:
        """Return ``True`` when a record at ``level`` may be emitted."""


__all__ = ["LevelSourcePort"]
