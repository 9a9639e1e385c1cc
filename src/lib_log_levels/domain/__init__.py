"""Domain value objects and pure functions behind level resolution."""

from __future__ import annotations

from .cache import LevelCache
from .levels import LogLevel, is_valid_level, name_to_level
from .resolver import resolve_level
from .spec import InvalidSpecificationError, LevelSpec, is_valid_logger_name, parse_spec, render_spec

__all__ = [
    "InvalidSpecificationError",
    "LevelCache",
    "LevelSpec",
    "LogLevel",
    "is_valid_level",
    "is_valid_logger_name",
    "name_to_level",
    "parse_spec",
    "render_spec",
    "resolve_level",
]
