import logging
from colorlog import ColoredFormatter
from loan_api.core.settings import settings

# thread name is kept: requests hit the store from several workers
LOG_FORMAT = (
    "%(log_color)s[%(asctime)s] [%(levelname)-8s] [%(threadName)s] "
    "%(reset)s%(blue)s%(name)s:%(reset)s %(message)s"
)

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def build_handler() -> logging.Handler:
    formatter = ColoredFormatter(
        LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        reset=True,
        log_colors=LOG_COLORS,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    return handler


def set_level(level: str) -> None:
    """Change the level of the application logger at runtime."""
    logger.setLevel(level.upper())


logger = logging.getLogger("loan_api")
logger.setLevel(settings.LOG_LEVEL)
if not logger.handlers:
    logger.addHandler(build_handler())
logger.propagate = False
