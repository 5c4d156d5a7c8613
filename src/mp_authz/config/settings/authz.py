"""Config settings – AuthzSettings for :class:`~mp_authz.Ability`."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_authz.config.settings.base import Settings
from mp_authz.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class AuthzSettings(Settings):
    """Runtime options, read from ``AUTHZ_*`` by :class:`EnvSettingsLoader`.

    Attributes:
        service_name: Tag attached to every audit entry.
        audit_denials: Emit an audit entry for each denial raised by ``authorize``.
        log_level: stdlib level name used by :func:`configure_logging`.
    """

    _prefix: ClassVar[str] = "AUTHZ"

    service_name: str = "mp-authz"
    audit_denials: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                self.env_key("log_level"),
                self.log_level,
                f"expected one of {', '.join(_LEVELS)}",
                field="log_level",
            )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["AuthzSettings"]
