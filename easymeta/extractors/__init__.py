"""Catalog introspection for EasyMeta."""

from easymeta.extractors.sqlalchemy_extractor import SQLAlchemyTableReader

__all__ = ["SQLAlchemyTableReader"]
