"""
Environment configuration parsing and validation
"""
import pytest

from config import ConfigurationError, DesktopConfiguration
from core.data_models import PlatformFamily


def test_defaults():
    config = DesktopConfiguration.from_env({})
    assert config.platform_family is None
    assert config.fixed_columns is None
    assert (config.window_width, config.window_height) == (400, 800)
    assert config.log_level == "INFO"


def test_values_from_environment():
    config = DesktopConfiguration.from_env({
        "DASHBOARD_PLATFORM_FAMILY": "Android",
        "DASHBOARD_FIXED_COLUMNS": "3",
        "DASHBOARD_WINDOW_WIDTH": "1024",
        "DASHBOARD_WINDOW_HEIGHT": "768",
        "DASHBOARD_LOG_LEVEL": "debug",
    })
    assert config.platform_family is PlatformFamily.ANDROID
    assert config.fixed_columns == 3
    assert (config.window_width, config.window_height) == (1024, 768)
    assert config.log_level == "DEBUG"
    assert config.summary()['platform_family'] == "android"


def test_blank_values_use_defaults():
    config = DesktopConfiguration.from_env({"DASHBOARD_FIXED_COLUMNS": " ", "DASHBOARD_PLATFORM_FAMILY": ""})
    assert config.fixed_columns is None
    assert config.platform_family is None


@pytest.mark.parametrize("env", [
    {"DASHBOARD_PLATFORM_FAMILY": "symbian"},
    {"DASHBOARD_FIXED_COLUMNS": "two"},
    {"DASHBOARD_FIXED_COLUMNS": "0"},
    {"DASHBOARD_WINDOW_WIDTH": "-400"},
    {"DASHBOARD_WINDOW_HEIGHT": "0"},
    {"DASHBOARD_LOG_LEVEL": "chatty"},
])
def test_invalid_values_raise(env):
    with pytest.raises(ConfigurationError):
        DesktopConfiguration.from_env(env)


def test_blank_log_level_uses_default():
    assert DesktopConfiguration.from_env({"DASHBOARD_LOG_LEVEL": ""}).log_level == "INFO"
    assert DesktopConfiguration.from_env({"DASHBOARD_LOG_LEVEL": "  "}).log_level == "INFO"
