"""
Logging configuration.
"""
import logging
import sys

from edge_router.config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger from application settings.

    Args:
        settings: Application settings providing the log level
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
