#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/log.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = 'soft_wireframe_engine'
LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'


def setup_logging(level: Union[int, str] = logging.WARNING,
                  log_file: Optional[Union[str, Path]] = None,
                  console: bool = True) -> logging.Logger:
    """
    Configure the package logger.

    Logs go to ``log_file`` when given, otherwise to stderr.  With
    ``console=False`` and no file they are discarded, which is what the
    curses demo wants while it owns the screen.
    Calling this again replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding='utf-8')
    elif console:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
