"""Process-wide logging setup."""
import logging

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger with a single stream handler."""
    settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("videohub").setLevel(level)
    # Driver chatter stays at WARNING unless explicitly debugging
    if level > logging.DEBUG:
        logging.getLogger("pymongo").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
