"""Adapters bridging the level engine to concrete logging frameworks."""

from __future__ import annotations

from .logging_filter import ModuleLevelFilter, install_filter

__all__ = ["ModuleLevelFilter", "install_filter"]
