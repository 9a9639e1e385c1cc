"""Level specification grammar: parsing, validation, and rendering.

Purpose
-------
Translate the operator-facing specification string into an immutable
:class:`LevelSpec` and back again.

Contents
--------
* :class:`LevelSpec` - frozen ``default_level`` + read-only ``overrides``.
* :class:`InvalidSpecificationError` - the single error raised for bad input.
* :func:`parse_spec` / :func:`render_spec` - the grammar in both directions.
* :func:`is_valid_logger_name` - logger-name syntax check.

Grammar
-------
``[<logger>[,<logger>...]=]<level>[:[<logger>[,<logger>...]=]<level>...]``

A logger key ending in ``.`` applies to exactly that logger; without the
trailing ``.`` it applies to the logger and all of its descendants.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .levels import LogLevel, is_valid_level, name_to_level

SEGMENT_SEPARATOR = ":"
ASSIGNMENT = "="
LOGGER_SEPARATOR = ","
NAME_SEPARATOR = "."

_LOGGER_NAME_RE = re.compile(r"[A-Za-z0-9_#:-]+(\.[A-Za-z0-9_#:-]+)*")


class InvalidSpecificationError(ValueError):
    """Raised when a level specification cannot be parsed.

    Attributes
    ----------
    spec:
        The full specification string as supplied by the caller.
    segment:
        The segment or logger key that failed validation.
    reason:
        Short description such as ``"bad segment"`` or ``"bad logger name"``.
    """

    def __init__(self, spec: str, segment: str, reason: str) -> None:
        self.spec = spec
        self.segment = segment
        self.reason = reason
        super().__init__(f"invalid logging specification '{spec}': {reason} '{segment}'")


@dataclass(slots=True, frozen=True)
class LevelSpec:
    """Immutable configuration: a default level plus per-logger overrides."""

    default_level: LogLevel = LogLevel.INFO
    overrides: Mapping[str, LogLevel] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))


def is_valid_logger_name(logger_name: str) -> bool:
    """Return ``True`` when ``logger_name`` is a well-formed dotted name.

    Names that begin or end with a period, contain empty segments, or use
    characters other than alphanumerics, ``_``, ``#``, ``:`` and ``-`` are
    invalid.

    Examples
    --------
    >>> is_valid_logger_name("peer.gossip#1")
    True
    >>> is_valid_logger_name("bad..name"), is_valid_logger_name(".lead")
    (False, False)
    """

    return _LOGGER_NAME_RE.fullmatch(logger_name) is not None


def parse_spec(spec: str) -> LevelSpec:
    """Parse ``spec`` into a :class:`LevelSpec` without touching any engine.

    The default level is INFO unless a default segment sets another. The
    result is built entirely locally; any failure raises before a value is
    returned, so callers can commit the result atomically.

    Raises
    ------
    InvalidSpecificationError
        When a segment has more than one ``=``, an empty logger list, a bad
        logger name, or an unknown non-empty level.

    Examples
    --------
    >>> parsed = parse_spec("gossip,msp.=debug:warning")
    >>> parsed.default_level is LogLevel.WARNING
    True
    >>> sorted(parsed.overrides)
    ['gossip', 'msp.']
    """

    default = LogLevel.INFO
    overrides: dict[str, LogLevel] = {}
    for segment in spec.split(SEGMENT_SEPARATOR):
        parts = segment.split(ASSIGNMENT)
        if len(parts) == 1:
            if segment and not is_valid_level(segment):
                raise InvalidSpecificationError(spec, segment, "bad segment")
            default = name_to_level(segment)
        elif len(parts) == 2:
            loggers, level_name = parts
            if not loggers:
                raise InvalidSpecificationError(spec, segment, "no logger specified in segment")
            if level_name and not is_valid_level(level_name):
                raise InvalidSpecificationError(spec, segment, "bad segment")
            level = name_to_level(level_name)
            for logger in loggers.split(LOGGER_SEPARATOR):
                # A single trailing period marks an exact-match key; it is kept
                # in the stored key but ignored for syntax validation.
                bare = logger[:-1] if logger.endswith(NAME_SEPARATOR) else logger
                if not is_valid_logger_name(bare):
                    raise InvalidSpecificationError(spec, logger, "bad logger name")
                overrides[logger] = level
        else:
            raise InvalidSpecificationError(spec, segment, "bad segment")
    return LevelSpec(default_level=default, overrides=overrides)


def render_spec(spec: LevelSpec) -> str:
    """Return the canonical textual form of ``spec``.

    Overrides are sorted by key and the default level is always the last field.

    Examples
    --------
    >>> render_spec(parse_spec("b=error:a.=DEBUG:WARN"))
    'a.=debug:b=error:warning'
    >>> render_spec(LevelSpec())
    'info'
    """

    fields = [f"{key}{ASSIGNMENT}{spec.overrides[key].severity}" for key in sorted(spec.overrides)]
    fields.append(spec.default_level.severity)
    return SEGMENT_SEPARATOR.join(fields)


__all__ = [
    "InvalidSpecificationError",
    "LevelSpec",
    "is_valid_logger_name",
    "parse_spec",
    "render_spec",
]
