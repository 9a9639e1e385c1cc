"""stdlib :mod:`logging` filter backed by a level source.

Purpose
-------
Gate :class:`logging.LogRecord` objects on the level resolved for
``record.name`` so a specification activated at runtime takes effect for every
stdlib logger without touching their configured levels one by one.

Contents
--------
* :class:`ModuleLevelFilter` - :class:`logging.Filter` implementation.
* :func:`install_filter` - attach a filter to a handler or logger.

Notes
-----
Filters attached to a logger only see records created on that logger, not
records propagated from children. Attach to handlers to cover a hierarchy, and
keep the stdlib loggers themselves at ``DEBUG`` (or ``NOTSET``) so records reach
the filter at all.
"""

from __future__ import annotations

import logging

from lib_log_levels.application.ports.levels import LevelSourcePort
from lib_log_levels.domain.levels import LogLevel

logger = logging.getLogger(__name__)


class ModuleLevelFilter(logging.Filter):
    """Drop records below the level resolved for their logger name.

    Examples
    --------
    >>> from lib_log_levels.module_levels import ModuleLevels
    >>> levels = ModuleLevels()
    >>> levels.activate_spec("noisy=error:debug")
    >>> gate = ModuleLevelFilter(levels)
    >>> record = logging.LogRecord("noisy.child", logging.WARNING, __file__, 1, "msg", None, None)
    >>> gate.filter(record)
    False
    >>> record.name = "quiet"
    >>> gate.filter(record)
    True
    """

    def __init__(self, source: LevelSourcePort, name: str = "") -> None:
        super().__init__(name)
        self._source = source

    @property
    def source(self) -> LevelSourcePort:
        """Return the level source consulted for each record."""
        return self._source

    def filter(self, record: logging.LogRecord) -> bool:
        """Return ``True`` when ``record`` should be emitted."""
        if not super().filter(record):
            return False
        threshold = self._source.level(record.name)
        if threshold is LogLevel.DISABLED:
            return False
        return record.levelno >= threshold.to_python_level()


def install_filter(
    source: LevelSourcePort,
    target: logging.Handler | logging.Logger | None = None,
) -> ModuleLevelFilter:
    """Attach a :class:`ModuleLevelFilter` for ``source`` to ``target``.

    Without ``target`` the filter is added to every handler of the root logger.
    When the root logger has no handlers yet, the filter is attached to the root
    logger itself, which only gates records logged directly on it; a warning
    says so.
    """

    gate = ModuleLevelFilter(source)
    if target is not None:
        target.addFilter(gate)
        return gate
    root = logging.getLogger()
    if not root.handlers:
        logger.warning("Root logger has no handlers; attaching level filter to the root logger itself")
        root.addFilter(gate)
        return gate
    for handler in root.handlers:
        handler.addFilter(gate)
    return gate


__all__ = ["ModuleLevelFilter", "install_filter"]
