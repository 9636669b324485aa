"""
Shared utilities for resume_cli.

Common functionality used across contexts:
- Client settings
- Logger setup
"""

from resume_cli.utils.config import ClientSettings, load_settings

__all__ = ["ClientSettings", "load_settings"]
