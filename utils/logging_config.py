# utils/logging_config.py
import logging

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "landlordos"


def setup_logger() -> logging.Logger:
     logger = logging.getLogger(LOGGER_NAME)

     # Avoid duplicate handlers in dev reload
     if logger.handlers:
          return logger

     logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

     stream_handler = logging.StreamHandler()
     stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
     logger.addHandler(stream_handler)

     return logger


def get_logger(name: str) -> logging.Logger:
     """Child logger under the application logger, e.g. landlordos.payments."""
     return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger = setup_logger()
