import logging
import os

# This module provides a consistent logging interface for the package

LOGGER_NAME = "PATCHMATE"
ENV_LOG_LEVEL = "PATCHMATE_LOG_LEVEL"


def get_logger():
   # Create and configure the logger
   logger = logging.getLogger(LOGGER_NAME)

   # Remove any existing handlers
   logger.handlers.clear()

   # Prevent propagation to the root logger to avoid duplicate logs
   logger.propagate = False

   formatter = logging.Formatter("\033[35mPATCHMATE\033[0m: %(levelname)-8s %(message)s")
   handler = logging.StreamHandler()
   handler.setFormatter(formatter)
   logger.addHandler(handler)

   # Set level from environment or default to INFO
   level = os.environ.get(ENV_LOG_LEVEL, 'INFO').upper()
   if not isinstance(logging.getLevelName(level), int):
       level = 'INFO'
   logger.setLevel(level)
   return logger


def set_log_level(level: str):
   """Change the package log level at runtime (used by the CLI --verbose flag)."""
   logger.setLevel(level.upper())


logger = get_logger()
