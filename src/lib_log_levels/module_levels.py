"""Runtime engine tracking the effective level of every named logger.

Purpose
-------
Hold the active :class:`~lib_log_levels.domain.LevelSpec` for one process
component, answer ``level(name)`` on the logging hot path, and swap in a new
specification at runtime without a restart.

Contents
--------
* :class:`ModuleLevels` - the engine; callers own and pass around instances.

System Role
-----------
Transport layers (admin endpoints, signal handlers, CLI tools) only call
:meth:`ModuleLevels.activate_spec` and :meth:`ModuleLevels.spec`; emitters call
:meth:`ModuleLevels.level` or :meth:`ModuleLevels.is_enabled` per record.

Concurrency
-----------
The configuration and its resolution cache live together in one immutable
snapshot. Readers grab the snapshot reference once and never lock; activation
builds a fresh snapshot with an empty cache and installs it under an exclusive
lock, so a reader can never pair a new configuration with stale cached values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Mapping

from . import config as _config
from .domain import InvalidSpecificationError, LevelCache, LevelSpec, LogLevel, parse_spec, render_spec, resolve_level

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class _Snapshot:
    """Configuration paired with the cache derived from it."""

    spec: LevelSpec
    cache: LevelCache = field(default_factory=LevelCache)


class ModuleLevels:
    """Track and resolve logging levels for a dotted logger hierarchy.

    Examples
    --------
    >>> levels = ModuleLevels()
    >>> levels.activate_spec("gossip=debug:msp.=error:warning")
    >>> levels.level("gossip.election").name
    'DEBUG'
    >>> levels.level("msp").name, levels.level("msp.identity").name
    ('ERROR', 'WARNING')
    >>> levels.spec()
    'gossip=debug:msp.=error:warning'
    """

    def __init__(self, default_level: LogLevel = LogLevel.INFO) -> None:
        self._lock = RLock()
        self._state = _Snapshot(LevelSpec(default_level=default_level))

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "ModuleLevels":
        """Create an engine and activate the spec found in ``LOG_SPEC``, if any.

        Raises
        ------
        InvalidSpecificationError
            When the environment carries a malformed specification.
        """

        levels = cls()
        spec = _config.spec_from_environment(environ)
        if spec is not None:
            levels.activate_spec(spec)
        return levels

    def default_level(self) -> LogLevel:
        """Return the level used for loggers without a matching override."""
        return self._state.spec.default_level

    def snapshot(self) -> LevelSpec:
        """Return the active configuration."""
        return self._state.spec

    def activate_spec(self, spec: str) -> None:
        """Replace the active configuration with the one described by ``spec``.

        The specification has the form
        ``[<logger>[,<logger>...]=]<level>[:[<logger>[,<logger>...]=]<level>...]``.
        On error nothing changes and :class:`InvalidSpecificationError` is raised.
        """

        with self._lock:
            try:
                parsed = parse_spec(spec)
            except InvalidSpecificationError as exc:
                logger.warning("Rejected logging specification: %s", exc)
                raise
            previous = self._state
            self._state = _Snapshot(parsed)
            previous.cache.clear_all()
        logger.info("Activated logging specification %r", render_spec(parsed))

    def level(self, logger_name: str) -> LogLevel:
        """Return the effective level for ``logger_name``."""

        state = self._state
        level = state.cache.get(logger_name)
        if level is None:
            level = resolve_level(logger_name, state.spec)
            state.cache.put(logger_name, level)
        return level

    def is_enabled(self, logger_name: str, level: LogLevel) -> bool:
        """Return ``True`` when a record at ``level`` from ``logger_name`` should be emitted."""
        return self.level(logger_name).enabled(level)

    def spec(self) -> str:
        """Return the canonical form of the active specification."""
        return render_spec(self._state.spec)


__all__ = ["ModuleLevels"]
