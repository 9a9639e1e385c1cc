"""Protocols describing the collaborators adapters depend on."""

from __future__ import annotations

from .levels import LevelSourcePort

__all__ = ["LevelSourcePort"]
