"""Environment-driven configuration helpers.

Purpose
-------
Centralise how the command line and host applications discover settings:
optional ``.env`` loading and the ``LOG_SPEC`` environment variable carrying
the initial level specification.

Contents
--------
* :data:`DOTENV_ENV_VAR` / :data:`SPEC_ENV_VAR` - recognised variable names.
* :func:`should_use_dotenv` - precedence rule between CLI flag and environment.
* :func:`enable_dotenv` - load the nearest ``.env`` once, never overriding.
* :func:`spec_from_environment` - read the initial specification.
"""

from __future__ import annotations

import os
from pathlib import Path
from threading import Lock
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LIB_LOG_LEVELS_USE_DOTENV"
SPEC_ENV_VAR = "LOG_SPEC"

_TRUTHY = {"1", "true", "yes", "on"}

_dotenv_lock = Lock()
_dotenv_loaded = False
_dotenv_path: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="on")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file into :data:`os.environ`.

    The search walks upwards from ``search_from`` (default: the current working
    directory). Existing environment variables keep precedence. Loading happens
    at most once per process; later calls return the path found first.
    """

    global _dotenv_loaded, _dotenv_path
    with _dotenv_lock:
        if _dotenv_loaded:
            return _dotenv_path
        if search_from is None:
            found = find_dotenv(usecwd=True)
        else:
            found = _find_upwards(Path(search_from))
        _dotenv_loaded = True
        if not found:
            return None
        _dotenv_path = Path(found).resolve()
        load_dotenv(_dotenv_path, override=False)
        return _dotenv_path


def _find_upwards(start: Path) -> str:
    """Return the first ``.env`` in ``start`` or its parents, or ``""``."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def spec_from_environment(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the level specification from ``LOG_SPEC`` or ``None`` when unset.

    Examples
    --------
    >>> spec_from_environment({"LOG_SPEC": " gossip=debug:info "})
    'gossip=debug:info'
    >>> spec_from_environment({}) is None
    True
    """

    source = os.environ if environ is None else environ
    value = source.get(SPEC_ENV_VAR)
    if value is None or not value.strip():
        return None
    return value.strip()


def _reset_dotenv_state_for_testing() -> None:
    """Forget that a ``.env`` file was loaded."""
    global _dotenv_loaded, _dotenv_path
    with _dotenv_lock:
        _dotenv_loaded = False
        _dotenv_path = None


__all__ = [
    "DOTENV_ENV_VAR",
    "SPEC_ENV_VAR",
    "enable_dotenv",
    "should_use_dotenv",
    "spec_from_environment",
]
