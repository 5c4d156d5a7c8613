"""Config errors raised while reading settings from the environment.

Each error names the environment variable involved (``env_key``, e.g.
``AUTHZ_LOG_LEVEL``) and, when known, the settings field it feeds.
"""
from __future__ import annotations

from typing import Any

from mp_authz.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """The variable backing a field without default is not set."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, field: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"env_key": env_key, "field": field})
        super().__init__(f"Environment variable {env_key} is required", **kwargs)
        self.env_key = env_key
        self.field = field


class InvalidSettingValueError(ConfigError):
    """A value is present but cannot be coerced or is out of range."""

    default_code = "invalid_setting_value"

    def __init__(
        self,
        env_key: str,
        value: object,
        reason: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault(
            "detail", {"env_key": env_key, "field": field, "value": value, "reason": reason}
        )
        super().__init__(f"{env_key}={value!r} rejected: {reason}", **kwargs)
        self.env_key = env_key
        self.field = field
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
