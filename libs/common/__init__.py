"""Common utilities shared across explorer components.

Includes:
- ``config``: pydantic-settings configuration from environment variables.
- ``logging``: structured logging setup with structlog.

Import pattern:
- from libs.common.config import ExplorerConfig
- from libs.common.logging import configure_logging
"""
