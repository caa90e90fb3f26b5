# aceit/logging_config.py
import logging
import sys

from aceit.settings import settings


def setup_logging():
    """
    Set up logging configuration for the application.
    """
    logger = logging.getLogger()
    logger.setLevel(settings.LOG_LEVEL)

    # Console handler on stdout, same level as the root logger
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings.LOG_LEVEL)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Request lines from the AceIt API client are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logger


app_logger = setup_logging()
