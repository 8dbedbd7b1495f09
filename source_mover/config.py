"""Configuration management."""

import os

from . import __version__

# Console Configuration
LOG_FILE = os.getenv("SOURCE_MOVER_LOG_FILE", "source-mover.log")
FLUSH_RATE = os.getenv("SOURCE_MOVER_FLUSH_RATE", "0")
VERSION = os.getenv("SOURCE_MOVER_VERSION", __version__)

# GitHub Configuration
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
