"""Utility helpers for EasyMeta."""

from easymeta.utils.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
