"""JSONL logging for observability."""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


@dataclass
class LogRecord:
    """A single log record."""

    timestamp: str
    event: str
    uid: str | None = None
    chat_id: str | None = None
    interface: str | None = None
    intent: str | None = None
    activity: str | None = None
    slot: int | None = None
    duration_ms: float | None = None
    error: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding None values."""
        data = asdict(self)
        return {k: v for k, v in data.items() if v is not None and v != {}}


class JSONLLogger:
    """Logger that writes structured logs in JSONL format."""

    def __init__(
        self,
        log_dir: str | Path | None = None,
        filename: str = "logs.jsonl",
        max_size_mb: float = 10.0,
    ) -> None:
        if log_dir is None:
            log_dir = Path.home() / ".tally" / "logs"
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.filename = filename
        self.max_size_bytes = int(max_size_mb * 1024 * 1024)

    @property
    def log_path(self) -> Path:
        """Current log file path."""
        return self.log_dir / self.filename

    def _rotate_if_needed(self) -> None:
        """Rotate log file if it exceeds max size."""
        if not self.log_path.exists():
            return

        if self.log_path.stat().st_size >= self.max_size_bytes:
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
            rotated_name = f"{self.log_path.stem}_{timestamp}.jsonl"
            self.log_path.rename(self.log_dir / rotated_name)

    def _write(self, record: LogRecord) -> None:
        """Write a log record to the file."""
        self._rotate_if_needed()

        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record.to_dict(), ensure_ascii=False) + "\n")

    def log(
        self,
        event: str,
        *,
        uid: str | None = None,
        chat_id: str | None = None,
        interface: str | None = None,
        intent: str | None = None,
        activity: str | None = None,
        slot: int | None = None,
        duration_ms: float | None = None,
        error: str | None = None,
        **extra: Any,
    ) -> None:
        """Log an event."""
        record = LogRecord(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event=event,
            uid=uid,
            chat_id=chat_id,
            interface=interface,
            intent=intent,
            activity=activity,
            slot=slot,
            duration_ms=duration_ms,
            error=error,
            extra=extra if extra else {},
        )
        self._write(record)

    def log_interaction(
        self,
        uid: str,
        intent: str,
        *,
        interface: str | None = None,
        activity: str | None = None,
        slot: int | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Log a handled message and the slot it was recorded in."""
        self.log(
            "interaction",
            uid=uid,
            interface=interface,
            intent=intent,
            activity=activity,
            slot=slot,
            duration_ms=duration_ms,
        )

    def log_error(
        self,
        error: str,
        *,
        uid: str | None = None,
        chat_id: str | None = None,
        stage: str | None = None,
    ) -> None:
        """Log a failure while handling a message."""
        if stage:
            self.log("error", uid=uid, chat_id=chat_id, error=error, stage=stage)
        else:
            self.log("error", uid=uid, chat_id=chat_id, error=error)


# Global logger instance
_logger: JSONLLogger | None = None


def get_logger() -> JSONLLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = JSONLLogger()
    return _logger


def configure_logger(log_dir: str | Path | None = None, max_size_mb: float = 10.0) -> JSONLLogger:
    """Configure and return the global logger."""
    global _logger
    _logger = JSONLLogger(log_dir=log_dir, max_size_mb=max_size_mb)
    return _logger
