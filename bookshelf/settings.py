"""
Global settings and configuration for the Bookshelf application.
"""

import os

# Storage backend used when a Library is built without one ("list" or "set")
BACKEND = os.getenv("BOOKSHELF_BACKEND", "list")

# Root log level applied by the CLI
LOG_LEVEL = os.getenv("BOOKSHELF_LOG_LEVEL", "WARNING")
