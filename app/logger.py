# app/logger.py
import logging
import sys
from typing import Optional
from app.config import config

_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "gunicorn.error", "gunicorn.access")
_configured = False

def configure_logging(level: Optional[str] = None) -> None:
    """Set up the root logger from LOG_LEVEL; later calls are no-ops."""
    global _configured
    if _configured:
        return

    level_value = getattr(logging, (level or config.log_level).upper(), logging.INFO)
    formatter = logging.Formatter(_FMT)

    root = logging.getLogger()
    root.setLevel(level_value)
    if not root.handlers:
        root.addHandler(logging.StreamHandler(sys.stdout))
    for h in root.handlers:
        h.setLevel(level_value)
        if not h.formatter:
            h.setFormatter(formatter)

    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level_value)
    # request lines from the DeepSeek client only at WARNING and up
    logging.getLogger("httpx").setLevel(max(level_value, logging.WARNING))

    _configured = True

def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name or __name__)
