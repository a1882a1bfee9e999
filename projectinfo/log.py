import sys

from loguru import logger


def setup_logging(debug: bool = False) -> None:
    """Replaces loguru's default sink with a stderr sink at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")
