"""
Application-wide constants for testfinder.

This module contains default values and limits that are shared between the
mapping engine, the resolver and the configuration models.
"""

# File extensions (without the leading dot)
DEFAULT_BACKEND_EXTENSION = "rb"
DEFAULT_FRONTEND_EXTENSION = "tsx"

# Existence checks
DEFAULT_CHECK_TIMEOUT_SECONDS = 2.0
MAX_CHECK_TIMEOUT_SECONDS = 60.0

# Log file rotation
BYTES_PER_MB = 1024 * 1024
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FILE = "~/.cache/testfinder/testfinder.log"

# Repository discovery
REPOSITORY_MARKERS = (".git",)

# Placeholder substituted into opener command templates
OPENER_PATH_PLACEHOLDER = "{path}"
