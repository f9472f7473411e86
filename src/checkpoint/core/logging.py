import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Route log records to STDOUT so they interleave with test runner output.
    Existing root handlers are removed to avoid duplicated lines when called
    more than once.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)


def set_aiohttp_logging_level(level: int = logging.WARNING) -> None:
    """Lowers aiohttp's internal loggers, which are chatty when requests are mocked."""
    for name in ("aiohttp.access", "aiohttp.server", "aiohttp.web"):
        logging.getLogger(name).setLevel(level)
