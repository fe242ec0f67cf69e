"""
Configuration settings for the UWO Student Directory client.

Loads environment variables and provides configuration constants
with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from loguru import logger

# Load environment variables from a .env file in the working directory
ENV_FILE = Path.cwd() / '.env'

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
    logger.debug(f"Loaded configuration from {ENV_FILE}")

# =============================================================================
# Directory Endpoint
# =============================================================================

# Public student directory front-end and the backend it proxies to
DEFAULT_DIRECTORY_URL = 'http://uwo.ca/cgi-bin/dsgw/whois2html2'
DEFAULT_BACKEND_SERVER = 'localhost'

# =============================================================================
# Directory Paths
# =============================================================================

# Output and logs live under the caller's working directory unless overridden
BASE_DIR = Path(os.getenv('UWO_DIRECTORY_HOME', '') or Path.cwd()).resolve()
OUTPUT_DIR = BASE_DIR / 'output'
LOGS_DIR = BASE_DIR / 'logs'

# =============================================================================
# Request Configuration
# =============================================================================

def _get_int(key: str, default: int) -> int:
    """Get integer value from environment variable."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        logger.warning(f"Invalid value for {key}, using default: {default}")
        return default

def _get_bool(key: str, default: bool) -> bool:
    """Get boolean value from environment variable."""
    value = os.getenv(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on')

# Timeouts
REQUEST_TIMEOUT = _get_int('REQUEST_TIMEOUT', 30)

USER_AGENT = os.getenv(
    'USER_AGENT',
    'uwo-directory/0.1 (+https://uwo.ca/westerndir/index.html)',
).strip()

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_MAX_SIZE = _get_int('LOG_MAX_SIZE', 10) * 1024 * 1024  # Convert MB to bytes
LOG_BACKUP_COUNT = _get_int('LOG_BACKUP_COUNT', 5)

# =============================================================================
# Testing
# =============================================================================

# Tests that talk to the real directory are skipped unless this is set
RUN_LIVE_TESTS = _get_bool('RUN_LIVE_TESTS', False)
