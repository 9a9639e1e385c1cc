"""Severity scale shared by the parser, resolver, and adapters.

Purpose
-------
Offer a totally ordered representation of log severities, including a
``DISABLED`` sentinel, together with the name conversions used by the level
specification grammar.

Contents
--------
* :class:`LogLevel` enum with ordering, stdlib conversion, and threshold helpers.
* :func:`name_to_level` - lenient spelling lookup (unknown names become INFO).
* :func:`is_valid_level` - strict spelling check used before committing specs.

System Role
-----------
Validation and conversion are deliberately split: the parser calls
:func:`is_valid_level` first and only then converts, so the lenient fallback in
:func:`name_to_level` never masks a typo in an operator-supplied spec.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Enumerated logging levels ordered from most to least verbose."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    DISABLED = 60

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def severity(self) -> str:
        """Return the canonical lowercase name used in rendered specs."""

        return self.name.lower()

    def enabled(self, level: "LogLevel") -> bool:
        """Return ``True`` when a record at ``level`` passes this threshold.

        Examples
        --------
        >>> LogLevel.WARNING.enabled(LogLevel.ERROR)
        True
        >>> LogLevel.WARNING.enabled(LogLevel.INFO)
        False
        >>> LogLevel.DISABLED.enabled(LogLevel.CRITICAL)
        False
        """

        if self is LogLevel.DISABLED:
            return False
        return level >= self

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        if self is LogLevel.DISABLED:
            return _PYTHON_DISABLED
        return getattr(logging, self.name)

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`.

        Custom numeric levels round down to the nearest named level at or below
        them; anything under ``DEBUG`` maps to ``DEBUG``.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING) is LogLevel.WARNING
        True
        >>> LogLevel.from_python_level(25) is LogLevel.INFO
        True
        >>> LogLevel.from_python_level(5) is LogLevel.DEBUG
        True
        """

        result = cls.DEBUG
        for member in cls:
            if member.value <= level:
                result = member
        return result


_PYTHON_DISABLED = logging.CRITICAL + 10

_NAME_TABLE: dict[str, LogLevel] = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "notice": LogLevel.INFO,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
    "critical": LogLevel.CRITICAL,
    "fatal": LogLevel.CRITICAL,
    "disabled": LogLevel.DISABLED,
}
# Lowercase spellings; the uppercase form of each is accepted as well.


def _lookup(name: str) -> LogLevel | None:
    if name != name.lower() and name != name.upper():
        return None
    return _NAME_TABLE.get(name.lower())


def name_to_level(name: str) -> LogLevel:
    """Return the level for ``name``, falling back to ``INFO`` when unknown.

    Examples
    --------
    >>> name_to_level("DEBUG") is LogLevel.DEBUG
    True
    >>> name_to_level("") is LogLevel.INFO
    True
    >>> name_to_level("chatty") is LogLevel.INFO
    True
    """

    level = _lookup(name)
    return LogLevel.INFO if level is None else level


def is_valid_level(name: str) -> bool:
    """Return ``True`` when ``name`` is a recognised level spelling.

    Examples
    --------
    >>> is_valid_level("warn"), is_valid_level("WARN"), is_valid_level("Warn")
    (True, True, False)
    >>> is_valid_level("")
    False
    """

    return _lookup(name) is not None


__all__ = ["LogLevel", "is_valid_level", "name_to_level"]
