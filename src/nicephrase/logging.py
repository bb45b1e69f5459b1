import logging
import os

LOG_LEVEL_ENV = 'NICEPHRASE_LOG_LEVEL'
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level_for(name: str) -> int:
    # The codec and wordlist only warn; the command line reports progress.
    default_level = logging.INFO if name.endswith('.cli') else logging.WARNING

    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default_level
    level = getattr(logging, level_name.strip().upper(), None)
    return level if isinstance(level, int) else default_level


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_level_for(name))
    return logger
