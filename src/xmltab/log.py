from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "xmltab"


def get_logger(verbose: Optional[bool] = None) -> logging.Logger:
    """
    Return the package logger, attaching a stream handler on first use.

    ``verbose`` sets the level (INFO or WARNING); None leaves a configured
    level alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[xmltab] %(message)s"))
        logger.addHandler(handler)
        if verbose is None:
            verbose = False
    if verbose is not None:
        logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger
