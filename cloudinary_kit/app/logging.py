import json
import logging
from datetime import datetime, timezone

# Attributes passed through `extra=` that end up in the JSON line.
CONTEXT_FIELDS = ("url", "segment", "host", "media_type")

class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def setup_logging(level: str = "INFO", logger_name: str = "cloudinary_kit") -> None:
    """Attach a JSON stream handler to the library logger (not root, so host apps keep theirs)."""
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.setLevel(level.upper())

    h = logging.StreamHandler()
    h.setFormatter(JsonFormatter())
    logger.addHandler(h)
