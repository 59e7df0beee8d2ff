import os
import sys
import logging

# --------------------------------------------------------
# Unified logger for all PostureGuard modules
# --------------------------------------------------------
LOGGER_NAME = "postureguard"
LOG_LEVEL = os.environ.get("POSTUREGUARD_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(LOG_LEVEL)

# If no handlers exist, add one (avoid duplicate logs)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.propagate = False  # Prevent duplicate uvicorn logs


def log(msg):
    logger.info(msg)


# Explicit level helpers
def debug(msg):
    logger.debug(msg)

def info(msg):
    logger.info(msg)

def warn(msg):
    logger.warning(msg)

def error(msg):
    logger.error(msg)
