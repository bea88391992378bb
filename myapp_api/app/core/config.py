"""
Application settings.

The ``Settings`` dataclass reads the few tunable values directly from
environment variables, with defaults for all of them.  The listening
address is fixed: the service always binds ``0.0.0.0:8080``, so
``host`` and ``port`` are plain defaults rather than environment
lookups.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "myapp")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a file that receives a copy of every log record.
    log_file: str = os.getenv("LOG_FILE", "")

    # Listener address.  Not read from the environment.
    host: str = "0.0.0.0"
    port: int = 8080


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
