import sys

from loguru import logger


def setup_logging(verbose: bool = False) -> None:
    """Route loguru output to stderr; debug detail only when ``verbose``."""
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        )
    else:
        logger.add(
            sys.stderr,
            level="WARNING",
            format="<level>{level: <8}</level> | <level>{message}</level>",
        )
