"""Shared libraries for the sine sequence explorer.

Subpackages:
- ``libs.common``: configuration and structured logging.

Notes:
- Avoid generation-specific logic here; keep modules broadly useful.
"""
