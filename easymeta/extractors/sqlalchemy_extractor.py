"""
SQLAlchemy table reader for EasyMeta.

Uses the SQLAlchemy Inspector to read table metadata from a live database
and build the Table/Column models the dialect drivers consume.
"""

from typing import Any

from sqlalchemy import create_engine, inspect
from sqlalchemy import types as sqltypes
from sqlalchemy.dialects.mysql import SET
from sqlalchemy.engine import Engine, Inspector
from sqlalchemy.exc import CompileError, SQLAlchemyError

from easymeta.models.schema import Column, Table
from easymeta.utils.logger import get_logger

logger = get_logger(__name__)

# Types whose length attribute is a real column size
SIZED_TYPES = (sqltypes.String, sqltypes.LargeBinary, sqltypes.BINARY, sqltypes.VARBINARY)


class SQLAlchemyTableReader:
    """
    Table metadata reader backed by SQLAlchemy Inspector.

    Usage:
        with SQLAlchemyTableReader("postgresql+psycopg2://...") as reader:
            table = reader.read_table("orders", schema="public")
    """

    def __init__(self, source: str | Engine):
        """
        Initialize the reader.

        Args:
            source: SQLAlchemy URL, or an engine owned by the caller
        """
        self._url = source if isinstance(source, str) else None
        self._engine: Engine | None = None if isinstance(source, str) else source
        self._owns_engine = isinstance(source, str)
        self._inspector: Inspector | None = None

    @property
    def inspector(self) -> Inspector:
        """Get inspector, raising if not connected."""
        if self._inspector is None:
            raise RuntimeError("Not connected. Call connect() first.")
        return self._inspector

    @property
    def dialect_name(self) -> str:
        """SQLAlchemy dialect name of the source database (e.g., 'postgresql')."""
        return self.inspector.bind.dialect.name

    def connect(self) -> None:
        """Create the engine if needed and initialize the inspector."""
        try:
            if self._engine is None:
                self._engine = create_engine(self._url)
            self._inspector = inspect(self._engine)
            logger.debug(f"Connected to {self._engine.dialect.name} database")
        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            raise ConnectionError(f"Connection failed: {e}") from e

    def disconnect(self) -> None:
        """Release the inspector, disposing the engine when the reader created it."""
        if self._owns_engine and self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.debug("Database connection closed")
        self._inspector = None

    def read_table(self, table_name: str, schema: str | None = None) -> Table:
        """
        Read the metadata of a single table.

        Args:
            table_name: Table name
            schema: Schema name (default schema of the connection when None)

        Returns:
            Table with its columns in ordinal order
        """
        pk_constraint = self.inspector.get_pk_constraint(table_name, schema=schema)
        pk_columns = set(pk_constraint.get("constrained_columns") or [])

        columns = [
            self._build_column(col, position, pk_columns)
            for position, col in enumerate(
                self.inspector.get_columns(table_name, schema=schema), start=1
            )
        ]

        return Table(
            schema_name=schema or self.inspector.default_schema_name or "public",
            name=table_name,
            columns=columns,
            comment=self._table_comment(table_name, schema),
        )

    def read_tables(self, schema: str | None = None) -> list[Table]:
        """
        Read every table of a schema, sorted by name.

        Tables that cannot be read are logged and skipped.
        """
        tables = []
        table_names = sorted(self.inspector.get_table_names(schema=schema))
        logger.debug(f"Found {len(table_names)} tables in schema {schema}")

        for table_name in table_names:
            try:
                tables.append(self.read_table(table_name, schema=schema))
            except (SQLAlchemyError, ValueError) as e:
                logger.warning(f"Failed to read table {table_name}: {e}")
                continue

        return tables

    def _build_column(self, col: dict[str, Any], position: int, pk_columns: set[str]) -> Column:
        sa_type = col["type"]
        default = col.get("default")

        return Column(
            name=col["name"],
            type=self._native_type_name(sa_type),
            length=self._type_length(sa_type),
            precision=getattr(sa_type, "precision", None),
            scale=getattr(sa_type, "scale", None),
            nullable=col.get("nullable", True),
            default_value=str(default) if default is not None else None,
            comment=col.get("comment"),
            is_pk=col["name"] in pk_columns,
            auto_increment=col.get("autoincrement") is True,
            position=position,
        )

    def _native_type_name(self, sa_type: Any) -> str:
        """
        Type name as compiled for the source dialect.

        Length and precision modifiers are removed, they travel in the column
        fields. Enumerated types keep their value list, e.g. ``ENUM('a','b')``.
        """
        try:
            compiled = sa_type.compile(dialect=self.inspector.bind.dialect)
        except CompileError:
            compiled = type(sa_type).__name__.upper()
        if _is_enumerated(sa_type):
            return compiled.strip()
        return compiled.split("(", 1)[0].strip()

    @staticmethod
    def _type_length(sa_type: Any) -> int | None:
        if _is_enumerated(sa_type) or not isinstance(sa_type, SIZED_TYPES):
            return None
        return sa_type.length

    def _table_comment(self, table_name: str, schema: str | None) -> str | None:
        if not self.inspector.bind.dialect.supports_comments:
            return None
        return self.inspector.get_table_comment(table_name, schema=schema).get("text")

    def __enter__(self) -> "SQLAlchemyTableReader":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.disconnect()


def _is_enumerated(sa_type: Any) -> bool:
    """True for ENUM/SET types, whose length is derived from their values."""
    return isinstance(sa_type, (sqltypes.Enum, SET))
