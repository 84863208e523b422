"""
JSONL logging bootstrap for the nsloader CLI.
Library code only creates module loggers; the CLI installs the sink.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

DEFAULT_PATH = os.environ.get("NSLOADER_LOG_PATH", "./nsloader.log.jsonl")
DEFAULT_LEVEL = os.environ.get("NSLOADER_LOG_LEVEL", "WARNING").upper()

_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_record(self, record: logging.LogRecord) -> dict:
        payload = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "nsloader.log", "ver": "1.0.0"},
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Extra fields passed via logger.debug(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                payload.setdefault(key, value)
        return payload

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = json.dumps(self.format_record(record), ensure_ascii=False, default=str)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | Path | None = None, level: str | None = None) -> JsonlHandler:
    path = path or DEFAULT_PATH
    level = (level or DEFAULT_LEVEL).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.WARNING))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
    handler = JsonlHandler(path)
    root.addHandler(handler)
    return handler
