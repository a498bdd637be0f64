"""
Configuration for the mesh generator.
"""

from .config import Settings, get_settings, settings
from .logging_config import configure_logging

__all__ = ['Settings', 'get_settings', 'settings', 'configure_logging']
