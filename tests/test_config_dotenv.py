from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_levels import cli as cli_module
from lib_log_levels import config as log_config
from lib_log_levels.domain.levels import LogLevel
from lib_log_levels.module_levels import ModuleLevels


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects the level specification."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_SPEC=db=debug:error\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_SPEC", raising=False)

    loaded = log_config.enable_dotenv()

    try:
        assert loaded == env_file.resolve()
        assert os.environ["LOG_SPEC"] == "db=debug:error"
        assert ModuleLevels.from_environment().level("db.pool") is LogLevel.DEBUG
    finally:
        os.environ.pop("LOG_SPEC", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_SPEC=debug\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_SPEC", "warning")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_SPEC"] == "warning"


def test_enable_dotenv_searches_from_given_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / "project"
    deep = project / "a" / "b"
    deep.mkdir(parents=True)
    env_file = project / ".env"
    env_file.write_text("LIB_LOG_LEVELS_EXAMPLE=1\n")
    monkeypatch.delenv("LIB_LOG_LEVELS_EXAMPLE", raising=False)

    try:
        assert log_config.enable_dotenv(search_from=deep) == env_file.resolve()
        assert os.environ["LIB_LOG_LEVELS_EXAMPLE"] == "1"
    finally:
        os.environ.pop("LIB_LOG_LEVELS_EXAMPLE", None)


def test_enable_dotenv_loads_once(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / ".env").write_text("")
    (second / ".env").write_text("")

    assert log_config.enable_dotenv(search_from=first) == (first / ".env").resolve()
    assert log_config.enable_dotenv(search_from=second) == (first / ".env").resolve()


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (None, None, False),
        (None, "yes", True),
        (None, "0", False),
        (True, None, True),
        (False, "1", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_spec_from_environment_ignores_blank_values() -> None:
    assert log_config.spec_from_environment({"LOG_SPEC": "   "}) is None
    assert log_config.spec_from_environment({"LOG_SPEC": "debug"}) == "debug"


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
