"""Hierarchy walk that picks the most specific level for a logger name."""

from __future__ import annotations

from .levels import LogLevel
from .spec import NAME_SEPARATOR, LevelSpec


def resolve_level(logger_name: str, spec: LevelSpec) -> LogLevel:
    """Return the level that applies to ``logger_name`` under ``spec``.

    The exact-match key (``name.``) is only consulted for the logger itself;
    ancestors are checked in bare form from the longest prefix down to the
    top-level segment before falling back to the default level.

    Examples
    --------
    >>> from lib_log_levels.domain.spec import parse_spec
    >>> spec = parse_spec("a.b.=error:a.b=debug")
    >>> resolve_level("a.b", spec).name, resolve_level("a.b.c", spec).name
    ('ERROR', 'DEBUG')
    >>> resolve_level("z", spec).name
    'INFO'
    """

    overrides = spec.overrides
    level = overrides.get(logger_name + NAME_SEPARATOR)
    if level is not None:
        return level

    candidate = logger_name
    while True:
        level = overrides.get(candidate)
        if level is not None:
            return level
        idx = candidate.rfind(NAME_SEPARATOR)
        if idx <= 0:
            return spec.default_level
        candidate = candidate[:idx]


__all__ = ["resolve_level"]
