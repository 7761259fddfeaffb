import logging
from typing import Optional


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'


#-- initialize a logger writing to the console, or to a file when log_file is given
def setup_logger(name: Optional[str] = None, level=logging.INFO, log_file: Optional[str] = None):
    formatter = logging.Formatter(LOG_FORMAT)
    if log_file:
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger
