from .config import config
from .logger import get_logger
from .main import app


__all__ = ["app",
           "config",
           "get_logger",
           ]
