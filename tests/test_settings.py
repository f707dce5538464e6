import importlib

import pytest

from config import get_settings_module
from src.time_bank.time_bank.core.enums import PairingPolicy
from src.time_bank.time_bank.core.exceptions import ValidationError
from src.time_bank.time_bank.core.settings import EngineSettings


@pytest.mark.parametrize(
    "env,module",
    [("production", "config.production"), ("test", "config.testing"), ("whatever", "config.development")],
)
def test_settings_module_from_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_engine_settings_from_testing_module():
    settings = EngineSettings.from_module(importlib.import_module("config.testing"))

    assert settings.timezone == "America/Sao_Paulo"
    assert settings.default_break_minutes == 60
    assert settings.daily_threshold_minutes == 480
    assert settings.pairing_policy == PairingPolicy.FIRST_PAIR


def test_engine_settings_reject_unknown_values():
    class Bad:
        TIMEZONE = "Mars/Olympus"

    class BadPolicy:
        PAIRING_POLICY = "best_guess"

    with pytest.raises(ValidationError):
        EngineSettings.from_module(Bad)
    with pytest.raises(ValidationError):
        EngineSettings.from_module(BadPolicy)
