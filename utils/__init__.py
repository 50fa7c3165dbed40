"""
utils/__init__.py - Shared Helpers

Logger construction used by every component of the word counter.
"""

import os
import logging


def get_logger(name, filename=None, log_dir=None):
    """
    Return a named logger writing INFO to the console and, when log_dir
    is given, DEBUG to a file.

    Args:
        name: Logger name shown in each record
        filename: Log file name without extension (defaults to name)
        log_dir: Directory holding the log files (created if missing)
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    log_path = None
    if log_dir:
        log_path = os.path.abspath(
            os.path.join(log_dir, f"{filename if filename else name}.log"))

    # Already set up for this destination
    current = [h.baseFilename for h in logger.handlers
               if isinstance(h, logging.FileHandler)]
    if logger.handlers and current == ([log_path] if log_path else []):
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_path:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        fh = logging.FileHandler(log_path)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
