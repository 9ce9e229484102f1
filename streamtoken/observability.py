import logging
import sys

from streamtoken.core.config import get_settings

logger = logging.getLogger("streamtoken")
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    # Logs go to stderr so stdout only ever carries the token.
    settings = get_settings()
    if level is None:
        level = getattr(settings, "log_level", "WARNING")
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            getattr(settings, "log_format", DEFAULT_LOG_FORMAT),
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False
