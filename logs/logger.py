"""
This module sets up the logging configuration for the application.
Error messages are always written to a file inside the configured log directory.
"""
import logging
import os

from config import config

# Create the log directory if it doesn't already exist
os.makedirs(config.log_dir, exist_ok=True)

# - level: taken from LOG_LEVEL, ERROR unless overridden.
# - filemode: 'a' means append mode, so new log messages are added to the end of the file.
logging.basicConfig(
    level=getattr(logging, config.log_level),
    format="%(asctime)s - %(levelname)s - %(message)s",
    filename=os.path.join(config.log_dir, "errors.log"),
    filemode="a"
)

def log_error(message: str) -> None:
    """
    Logs an error message to the configured error log file.

    Args:
        message (str): The error message string to be logged.
    """
    logging.error(message)
