"""
Structured Logging with Trace IDs
=================================

JSON-structured logging with per-round tracing, so a single approval
round (policy check, transaction post, follow-up actions) can be followed
through the logs.
"""

import json
import logging
import re
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime

# Context variable to store trace_id for the current approval round
_trace_id_var: ContextVar[str | None] = ContextVar('trace_id', default=None)

# Stellar secret seeds (S + 55 base32 chars) and bearer tokens
_SECRET_PATTERNS = re.compile(
    r"(\bS[A-Z2-7]{55}\b|Bearer\s+[A-Za-z0-9._~+/=-]+)",
)


def _redact_secrets(text: str) -> str:
    return _SECRET_PATTERNS.sub("[REDACTED]", text)


class StructuredLogger:
    """
    Structured logger that outputs JSON logs with trace IDs

    Example output:
    {
        "timestamp": "2026-04-26T10:30:45.123Z",
        "level": "INFO",
        "trace_id": "abc123",
        "component": "RegulatedAssetsService",
        "message": "Approval outcome received",
        "status": "pending",
        "asset": "REG"
    }
    """

    def __init__(self, component: str, logger: logging.Logger | None = None) -> None:
        """
        Initialize structured logger

        Args:
            component: Component name (e.g., 'RegulatedAssetsService')
            logger: Optional existing logger (creates new if not provided)
        """
        self.component = component
        self.logger = logger or logging.getLogger(component)

    def _log(self, level: str, message: str, **kwargs) -> None:
        trace_id = _trace_id_var.get()

        log_entry = {
            'timestamp': datetime.now(tz=UTC).isoformat(),
            'level': level,
            'component': self.component,
            'message': _redact_secrets(message),
        }

        if trace_id:
            log_entry['trace_id'] = trace_id

        for k, v in kwargs.items():
            log_entry[k] = _redact_secrets(v) if isinstance(v, str) else v

        json_log = _redact_secrets(json.dumps(log_entry, default=str))

        log_method = getattr(self.logger, level.lower())
        log_method(json_log)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message"""
        self._log('DEBUG', message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message"""
        self._log('INFO', message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message"""
        self._log('WARNING', message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message"""
        self._log('ERROR', message, **kwargs)


class TraceContext:
    """
    Context manager for setting trace_id for one approval round

    Usage:
        with TraceContext() as trace_id:
            # All logs within this context will include this trace_id
            logger.info("Posting transaction")
    """

    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or self._generate_trace_id()
        self.token = None

    def __enter__(self) -> str:
        self.token = _trace_id_var.set(self.trace_id)
        return self.trace_id

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _trace_id_var.reset(self.token)

    @staticmethod
    def _generate_trace_id() -> str:
        """Generate a unique trace ID"""
        return str(uuid.uuid4())[:8]  # Short UUID


def current_trace_id() -> str | None:
    """Return the trace id of the enclosing TraceContext, if any"""
    return _trace_id_var.get()
