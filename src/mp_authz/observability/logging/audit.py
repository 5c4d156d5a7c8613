"""Observability – AuditLogger.

A dedicated structured-log sink for authorization denials.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

import structlog


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    SUCCESS = "success"
    DENIED = "denied"


def _principal_id(principal: Any) -> str:
    try:
        value = getattr(principal, "id", None)
        return str(principal) if value is None else str(value)
    except Exception:  # noqa: BLE001
        return type(principal).__name__


class AuditLogger:
    """Structured-log sink for security-sensitive actions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog-style logger (``warning(event, **fields)``).
        Defaults to ``structlog.get_logger("audit")``.
    """

    def __init__(self, service: str = "unknown", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else structlog.get_logger("audit")

    def log_access(
        self,
        principal: Any,
        resource: str,
        action: str,
        outcome: AuditOutcome | str = AuditOutcome.SUCCESS,
        **extra: Any,
    ) -> None:
        """Record an access decision.

        Parameters
        ----------
        principal:
            The actor.  Recorded as ``principal.id`` when present, else
            ``str(principal)``; falls back to the type name if either raises.
        resource:
            Short description of the target (e.g. its type name).
        action:
            The action(s) requested, comma separated.
        outcome:
            :class:`AuditOutcome` or plain string.
        **extra:
            Additional structured fields to include in the audit entry.
        """
        principal_id = _principal_id(principal)
        entry: dict[str, Any] = {
            "service": self._service,
            "principal_id": principal_id,
            "resource": resource,
            "action": action,
            "outcome": outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        self._log.warning("audit.access", **entry)


__all__ = ["AuditLogger", "AuditOutcome"]
