"""
EasyMeta - SQL dialect drivers for metadata browsing

Generates vendor-specific DDL, select and paginated query text from a
vendor-neutral table/column metadata model.
"""

__version__ = "0.1.0"
__author__ = "EasyMeta Team"

from easymeta.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
