import logging
from .config import app

_LOGGER_NAME = "geoguess"

logging.basicConfig(
    level=app.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

def get_logger(name: str = _LOGGER_NAME) -> logging.Logger:
    """Return the service logger, or a child of it when a suffix is given"""
    if name != _LOGGER_NAME and not name.startswith(_LOGGER_NAME + "."):
        name = f"{_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
