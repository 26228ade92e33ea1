"""
Shared utilities package.

This package contains logging configuration used across the application.
"""

from popcorn.utils.logging_config import setup_logging, configure_ui_logging

__all__ = ['setup_logging', 'configure_ui_logging']
