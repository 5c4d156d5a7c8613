"""Config settings – env-based configuration."""
from mp_authz.config.settings.base import Settings
from mp_authz.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_authz.config.settings.authz import AuthzSettings

__all__ = ["AuthzSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
