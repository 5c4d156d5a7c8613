"""Config settings – dataclass base mapped onto ``{PREFIX}_{FIELD}`` variables."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields are read from prefixed environment variables.

    ``_validate`` runs after construction, whichever way the instance was
    built; raise :class:`~mp_authz.config.validation.InvalidSettingValueError`
    from it.
    """

    _prefix: ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Return the variable backing *field_name*, e.g. ``AUTHZ_LOG_LEVEL``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
