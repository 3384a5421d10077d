"""Structured logging setup."""
import logging, sys, json
from typing import Optional

_RESERVED = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        # fields passed through `extra=`
        for k, v in record.__dict__.items():
            if k in _RESERVED or k.startswith("_"):
                continue
            base[k] = v
        return json.dumps(base, default=str)


def configure_logging(level: str = "INFO", fmt: str = "json", log_file: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if getattr(root, "_moodlift_configured", False):
        return
    handler: logging.Handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
    root._moodlift_configured = True
