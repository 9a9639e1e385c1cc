"""Runtime-adjustable logging levels for dotted logger hierarchies.

Create a :class:`ModuleLevels` engine, activate a specification such as
``"gossip,msp=debug:peer.=warning:info"`` and ask it for the effective level
of any logger name. Attach :class:`ModuleLevelFilter` to stdlib handlers to
apply the resolved levels to :mod:`logging` records.
"""

from __future__ import annotations

from .adapters import ModuleLevelFilter, install_filter
from .application.ports import LevelSourcePort
from .domain import (
    InvalidSpecificationError,
    LevelSpec,
    LogLevel,
    is_valid_level,
    is_valid_logger_name,
    name_to_level,
    parse_spec,
    render_spec,
)
from .module_levels import ModuleLevels

__all__ = [
    "InvalidSpecificationError",
    "LevelSourcePort",
    "LevelSpec",
    "LogLevel",
    "ModuleLevelFilter",
    "ModuleLevels",
    "install_filter",
    "is_valid_level",
    "is_valid_logger_name",
    "name_to_level",
    "parse_spec",
    "render_spec",
]
