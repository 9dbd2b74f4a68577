# Shared utilities for the captions processor
import os
import logging


def setup_logging(logfile: str, name: str = None) -> logging.Logger:
    """
    Configure and return a logger that writes to 'logfile' and the console.

    With no name the root logger is configured, so module-level
    logging.info()/logging.warning() calls reach both handlers. Handlers are
    only added once per logger.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logdir = os.path.dirname(logfile)
    if logdir:
        os.makedirs(logdir, exist_ok=True)
    fmt = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
    handler = logging.FileHandler(logfile, encoding='utf-8')
    handler.setFormatter(fmt)
    console = logging.StreamHandler()
    console.setFormatter(fmt)

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    logger.addHandler(console)
    return logger
