"""
Core utilities and configuration for baremetal-db.

This package provides core functionality including settings, logging
configuration, database setup, and other shared utilities.
"""

from baremetal_db.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
