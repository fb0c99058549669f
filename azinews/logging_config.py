import logging
import sys
from azinews.config import CONFIG


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logger() -> logging.Logger:
    """Attach the stderr handler to the azinews logger and apply the configured level."""
    logger = logging.getLogger("azinews")
    logger.setLevel(getattr(logging, CONFIG.LOG_LEVEL.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def create_logger(component: str) -> logging.Logger:
    """Get the logger of one azinews component; its records reach the azinews handler."""
    return logging.getLogger(f"azinews.{component}")


logger = configure_logger()

__all__ = ["logger", "configure_logger", "create_logger"]
