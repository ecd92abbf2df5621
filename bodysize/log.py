"""
bodysize.log - logging setup for the library and the viewer.

Library modules log through `logging.getLogger(__name__)` and stay silent
until an application calls `configure()`.
"""

import logging

LINE_FORMAT = "[%(asctime)s][%(name)s][%(levelname)s]: %(message)s"

_handler = None


def configure(level=logging.INFO):
    """
    Install a stream handler on the package logger.
    Calling it again only changes the level.
    """
    global _handler

    logger = logging.getLogger("bodysize")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LINE_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


def set_level(level):
    logging.getLogger("bodysize").setLevel(level)
