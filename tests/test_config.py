import sys

import pytest
from pydantic import ValidationError

from core.config import (
    AppSettings,
    get_user_config_dir,
    get_user_env_file,
    normalize_log_level,
    write_user_env_vars,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("FUSIONALY_CONTROL_BINARY", "FUSIONALY_LOG_LEVEL", "FUSIONALY_COMMAND_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.control_binary == "/app/fnctl"
    assert settings.log_level == "info"
    assert settings.command_timeout_seconds is None


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUSIONALY_CONTROL_BINARY", "/usr/local/bin/fnctl")
    monkeypatch.setenv("FUSIONALY_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FUSIONALY_COMMAND_TIMEOUT_SECONDS", "30")
    settings = AppSettings(_env_file=None)
    assert settings.control_binary == "/usr/local/bin/fnctl"
    assert settings.log_level == "debug"
    assert settings.command_timeout_seconds == 30.0


def test_env_file(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FUSIONALY_CONTROL_BINARY=/opt/fnctl\n", encoding="utf-8")
    settings = AppSettings(_env_file=str(env_file))
    assert settings.control_binary == "/opt/fnctl"


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUSIONALY_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUSIONALY_COMMAND_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_normalize_log_level() -> None:
    assert normalize_log_level(" Warning ") == "warning"
    with pytest.raises(ValueError):
        normalize_log_level("trace")


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG layout")
def test_user_config_dir_honors_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "fusionaly-installer"


def test_write_user_env_vars_merges(tmp_path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"FUSIONALY_LOG_LEVEL": "debug", "OTHER": "1"}, env_path=env_path)
    write_user_env_vars({"FUSIONALY_LOG_LEVEL": "error", "SKIPPED": None}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "FUSIONALY_LOG_LEVEL=error" in lines
    assert "OTHER=1" in lines
    assert not any(line.startswith("SKIPPED") for line in lines)


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG layout")
def test_load_locates_user_env_at_call_time(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "first"))
    assert AppSettings.load().control_binary == "/app/fnctl"

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "second"))
    write_user_env_vars({"FUSIONALY_CONTROL_BINARY": "/srv/fnctl"}, env_path=get_user_env_file())
    assert AppSettings.load().control_binary == "/srv/fnctl"


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG layout")
def test_process_environment_beats_user_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    write_user_env_vars({"FUSIONALY_LOG_LEVEL": "debug"}, env_path=get_user_env_file())
    monkeypatch.setenv("FUSIONALY_LOG_LEVEL", "error")
    assert AppSettings.load().log_level == "error"
