"""Models package for EasyMeta."""

from easymeta.models.base import BaseModel
from easymeta.models.schema import (
    Column,
    ColumnType,
    QueryData,
    QueryOption,
    Table,
)

__all__ = [
    "BaseModel",
    "Column",
    "ColumnType",
    "QueryData",
    "QueryOption",
    "Table",
]
