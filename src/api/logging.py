"""Request logging for the API."""

import logging
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

from core.config import LOG_LEVEL

logger = logging.getLogger("api.requests")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    calendar_id: str | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    events_requested: int | None = None
    events_created: int | None = None
    details: list[tuple[str, str]] = field(default_factory=list)  # (type, message)


def log_request(log: RequestLog) -> None:
    """Emit one structured line per request; errors at WARNING."""
    record = {key: value for key, value in asdict(log).items() if value not in (None, [])}
    level = logging.INFO if log.status_code < 400 else logging.WARNING
    logger.log(level, "%s %s -> %s %s", log.method, log.endpoint, log.status_code, record)
