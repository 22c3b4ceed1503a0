# UniResearch - Audit log of guard decisions (authenticated requests only)
import json
import logging
import logging.handlers
import queue
from collections import deque
from pathlib import Path

from .models import AccessDecision, AuditEntry

logger = logging.getLogger("rbac.audit")
logger.setLevel(logging.INFO)

DEFAULT_BUFFER = 500

# In-memory ring for the audit sample endpoint
_audit_log: deque[AuditEntry] = deque(maxlen=DEFAULT_BUFFER)

# File output runs on the listener thread; the guard only enqueues
_queue_handler: logging.handlers.QueueHandler | None = None
_queue_listener: logging.handlers.QueueListener | None = None


class JsonLinesFormatter(logging.Formatter):
    """One JSON object per line: the audit entry attached to the record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = getattr(record, "audit_entry", None)
        if entry is None:
            return json.dumps({"message": record.getMessage()})
        return json.dumps(entry)


class AuditFileHandler(logging.FileHandler):
    """FileHandler whose open errors are reported by logging, not raised."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            super().emit(record)
        except Exception:
            self.handleError(record)


def configure_audit(audit_file: Path | None = None, buffer: int = DEFAULT_BUFFER) -> None:
    """Set the JSON-lines file and ring size. Called once from the app lifespan."""
    global _audit_log, _queue_handler, _queue_listener
    shutdown_audit()
    if buffer != _audit_log.maxlen:
        _audit_log = deque(_audit_log, maxlen=buffer)
    if audit_file is None:
        return
    audit_file.parent.mkdir(parents=True, exist_ok=True)
    # delay=True: the file is opened by the listener on first write; failures
    # there go through Handler.handleError, never back into the request
    file_handler = AuditFileHandler(audit_file, encoding="utf-8", delay=True)
    file_handler.setFormatter(JsonLinesFormatter())
    records: queue.Queue = queue.Queue(-1)
    _queue_handler = logging.handlers.QueueHandler(records)
    _queue_listener = logging.handlers.QueueListener(records, file_handler, respect_handler_level=True)
    logger.addHandler(_queue_handler)
    _queue_listener.start()


def shutdown_audit() -> None:
    """Flush and detach the file output, if any."""
    global _queue_handler, _queue_listener
    if _queue_listener is not None:
        _queue_listener.stop()
        for handler in _queue_listener.handlers:
            handler.close()
        _queue_listener = None
    if _queue_handler is not None:
        logger.removeHandler(_queue_handler)
        _queue_handler = None


def record_decision(entry: AuditEntry) -> None:
    _audit_log.append(entry)
    level = logging.INFO if entry.decision is AccessDecision.ALLOW else logging.WARNING
    logger.log(
        level,
        "%s %s role=%s principal=%s required=%s resource=%s reason=%s",
        entry.guard,
        entry.decision.value,
        entry.role,
        entry.principal_id,
        ",".join(entry.required) or "-",
        entry.resource_id or "-",
        entry.reason,
        extra={"audit_entry": entry.model_dump(mode="json")},
    )


def get_audit_sample(limit: int = 50) -> list[dict]:
    """Most recent entries, oldest first."""
    if limit <= 0:
        return []
    return [e.model_dump(mode="json") for e in list(_audit_log)[-limit:]]


def clear_audit_log() -> None:
    _audit_log.clear()
