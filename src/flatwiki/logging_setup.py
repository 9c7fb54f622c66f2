"""
Setup logging for the application.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "info") -> None:
    """
    Configure the root logger for command line use.

    ``level`` is a level name as accepted by uvicorn ("debug", "info", ...).
    """
    logging.basicConfig(format=LOG_FORMAT, level=level.upper())
    logging.getLogger("flatwiki").setLevel(level.upper())
