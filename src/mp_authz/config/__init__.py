"""Config – 12-factor settings for the rule engine."""

from mp_authz.config.settings import AuthzSettings, EnvSettingsLoader, Settings, SettingsLoader
from mp_authz.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "AuthzSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
