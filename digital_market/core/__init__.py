"""
Core utilities and configuration for digital-market.

This package provides core functionality including settings, logging
configuration and the database layer.
"""

from digital_market.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
