"""
Storage Layer.

This package manages the on-disk configuration file.
"""

from .config_manager import ConfigManager

__all__ = ["ConfigManager"]
