from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from lib_log_levels.adapters.logging_filter import ModuleLevelFilter, install_filter
from lib_log_levels.domain.levels import LogLevel
from lib_log_levels.module_levels import ModuleLevels


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.NOTSET)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


@pytest.fixture
def levels() -> ModuleLevels:
    engine = ModuleLevels()
    engine.activate_spec("tests.noisy=error:tests.chatty.=debug:warning")
    return engine


@pytest.fixture
def handler() -> Iterator[_ListHandler]:
    target = _ListHandler()
    root = logging.getLogger("tests")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(target)
    try:
        yield target
    finally:
        root.removeHandler(target)
        root.setLevel(previous_level)


@pytest.mark.parametrize(
    "name, level, expected",
    [
        ("tests.noisy.child", logging.WARNING, False),
        ("tests.noisy.child", logging.ERROR, True),
        ("tests.chatty", logging.DEBUG, True),
        ("tests.chatty.child", logging.DEBUG, False),
        ("tests.other", logging.INFO, False),
        ("tests.other", logging.WARNING, True),
    ],
)
def test_filter_gates_records_on_resolved_level(levels: ModuleLevels, name: str, level: int, expected: bool) -> None:
    assert ModuleLevelFilter(levels).filter(_record(name, level)) is expected


def test_filter_respects_name_restriction(levels: ModuleLevels) -> None:
    gate = ModuleLevelFilter(levels, name="other")

    assert gate.filter(_record("tests.other", logging.CRITICAL)) is False


def test_installed_filter_follows_reactivation(levels: ModuleLevels, handler: _ListHandler) -> None:
    gate = install_filter(levels, handler)
    logger = logging.getLogger("tests.noisy.db")

    logger.warning("dropped")
    levels.activate_spec("tests.noisy=debug:warning")
    logger.debug("kept")

    assert gate.source is levels
    assert [record.getMessage() for record in handler.records] == ["kept"]


def test_install_filter_defaults_to_root_handlers(levels: ModuleLevels) -> None:
    target = _ListHandler()
    root = logging.getLogger()
    root.addHandler(target)
    gate: ModuleLevelFilter | None = None
    try:
        gate = install_filter(levels)
        assert gate in target.filters
    finally:
        root.removeHandler(target)
        if gate is not None:
            for existing in root.handlers:
                existing.removeFilter(gate)


def test_filter_accepts_any_level_source() -> None:
    class _Fixed:
        def level(self, logger_name: str) -> LogLevel:
            return LogLevel.ERROR

        def is_enabled(self, logger_name: str, level: LogLevel) -> bool:
            return LogLevel.ERROR.enabled(level)

    gate = ModuleLevelFilter(_Fixed())

    assert gate.filter(_record("x", logging.ERROR)) is True
    assert gate.filter(_record("x", logging.INFO)) is False


@pytest.mark.parametrize(
    "spec, levelno, expected",
    [
        ("info", 15, False),
        ("info", 25, True),
        ("debug", 5, False),
        ("debug", 15, True),
        ("warning", 29, False),
        ("disabled", 1000, False),
    ],
)
def test_filter_compares_custom_numeric_levels_against_threshold(spec: str, levelno: int, expected: bool) -> None:
    engine = ModuleLevels()
    engine.activate_spec(spec)

    assert ModuleLevelFilter(engine).filter(_record("app", levelno)) is expected


def test_install_filter_without_root_handlers_attaches_to_root_logger(
    levels: ModuleLevels, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    warnings = _ListHandler()
    adapter_logger = logging.getLogger("lib_log_levels.adapters.logging_filter")
    adapter_logger.addHandler(warnings)
    gate: ModuleLevelFilter | None = None
    try:
        gate = install_filter(levels)

        assert gate in root.filters
        assert [record.levelno for record in warnings.records] == [logging.WARNING]
        assert "no handlers" in warnings.records[0].getMessage()
    finally:
        adapter_logger.removeHandler(warnings)
        if gate is not None:
            root.removeFilter(gate)
