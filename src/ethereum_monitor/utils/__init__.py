"""
Utility functions used by the state-change monitor.
"""

import logging


def get_stream_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Get a logger that writes to stderr at the given level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level=level.upper())
    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger
