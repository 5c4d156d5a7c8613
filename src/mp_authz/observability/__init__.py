"""Observability – structured logging and audit for the rule engine."""
from mp_authz.observability.logging import (
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    configure_logging,
    get_logger,
)

__all__ = ["AuditLogger", "AuditOutcome", "JsonLoggerFactory", "configure_logging", "get_logger"]
