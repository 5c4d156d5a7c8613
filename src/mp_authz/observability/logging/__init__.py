"""Observability – structlog logger factory and audit sink."""
from mp_authz.observability.logging.factory import JsonLoggerFactory, configure_logging, get_logger
from mp_authz.observability.logging.audit import AuditLogger, AuditOutcome

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
]
