"""
FILE DESCRIPTION: Foundational module for global configuration and logging.
KEY FUNCTIONS/CLASSES: setup_logger, CompanyFormatter
"""

import logging
import sys
import os
from datetime import datetime
from pathlib import Path
from dotenv import load_dotenv

# === CONFIGURATION SECTION ===

# Load .env at the beginning of core
load_dotenv(Path.cwd() / '.env')

# Snapshot listing host (no trailing slash)
STACKAGE_URL = os.getenv("STACKAGE_URL", "https://www.stackage.org").rstrip("/")

# Listing pages scanned before giving up
MAX_PAGES = int(os.getenv("STACKAGE_MAX_PAGES", 8))

# Network timeout for HTTP requests (seconds)
REQUEST_TIMEOUT = int(os.getenv("STACKAGE_REQUEST_TIMEOUT", 30))

USER_AGENT = "stackage-freeze/1.0"

# Toolchain version command
GHC_COMMAND = os.getenv("GHC_COMMAND", "ghc")

LOG_LEVEL = os.getenv("STACKAGE_LOG_LEVEL", "INFO").upper()

# Markup and file names published by Stackage
SNAPSHOT_LIST_CLASS = "snapshots"
CABAL_CONFIG_NAME = "cabal.config"
FREEZE_FILE_NAME = "cabal.project.freeze"


# === LOGGING SECTION ===

class CompanyFormatter(logging.Formatter):
    """
    FLOW: Receives a log record -> Extracts timestamp -> Formats according to company standard
    (e.g., [ Tue Jan 06 05:32:41 AM UTC 2026 ]) -> Prepends level and context -> Returns final string.
    """
    def format(self, record):
        dt = datetime.fromtimestamp(record.created)
        timestamp = dt.strftime("%a %b %d %I:%M:%S %p UTC %Y")
        context = getattr(record, 'context', 'root')
        return f"[ {timestamp} ] : {record.levelname} : {context} : {record.getMessage()}"

def setup_logger(name="stackage_freeze", log_file=None, level=None):
    """
    FLOW: Initializes/Retrieves logger -> Checks for existing handlers to prevent duplicates ->
    Sets propagation for child loggers -> Attaches Console and optional File handlers with CompanyFormatter.
    """
    if level is None:
        level = getattr(logging, LOG_LEVEL, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    if name != "stackage_freeze":
        logger.propagate = True
        setup_logger("stackage_freeze", log_file=log_file, level=level)
        return logger

    formatter = CompanyFormatter()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Only the root 'stackage_freeze' logger gets a FileHandler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
