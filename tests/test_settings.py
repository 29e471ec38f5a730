import pytest

from schemas import RunStatus
from settings import Settings

ENV_VARS = ["VQE_COMPLETION_DELAY_MS", "VQE_INITIAL_STATUS", "LOG_LEVEL", "HOST", "PORT", "FLASK_DEBUG"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(dotenv=False)
    assert settings.completion_delay_ms == 3000
    assert settings.completion_delay == 3.0
    assert settings.initial_status is RunStatus.COMPLETED
    assert settings.log_level == "INFO"
    assert (settings.host, settings.port, settings.debug) == ("0.0.0.0", 5000, False)


def test_overrides(monkeypatch):
    monkeypatch.setenv("VQE_COMPLETION_DELAY_MS", "250")
    monkeypatch.setenv("VQE_INITIAL_STATUS", "Idle")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FLASK_DEBUG", "yes")

    settings = Settings.from_env(dotenv=False)
    assert settings.completion_delay == 0.25
    assert settings.initial_status is RunStatus.IDLE
    assert settings.log_level == "DEBUG"
    assert settings.port == 8080
    assert settings.debug is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("VQE_COMPLETION_DELAY_MS", "soon"),
        ("VQE_COMPLETION_DELAY_MS", "-5"),
        ("VQE_INITIAL_STATUS", "paused"),
        ("LOG_LEVEL", "chatty"),
        ("PORT", "http"),
        ("FLASK_DEBUG", "maybe"),
    ],
)
def test_invalid_values_name_the_variable(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        Settings.from_env(dotenv=False)

