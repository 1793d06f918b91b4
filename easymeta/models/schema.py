"""
Metadata models for EasyMeta.

Defines the vendor-neutral description of database objects that the
dialect drivers turn into SQL text:
- Columns and Tables (for DDL and select statements)
- Query options and query data (for paginated data browsing)
"""

from enum import Enum

from pydantic import ConfigDict, Field

from easymeta.models.base import BaseModel


class ColumnType(str, Enum):
    """Canonical column types that native vendor types are mapped into."""

    STRING = "string"
    BOOLEAN = "boolean"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    BYTES = "bytes"
    JSON = "json"
    ARRAY = "array"
    UNKNOWN = "unknown"


class Column(BaseModel):
    """
    Column metadata model.

    Holds the vendor-native type name together with its length, precision
    and scale as read from the source database catalog.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Column name")
    type: str = Field(..., description="Vendor-native type name (e.g., varchar, numeric)")
    length: int | None = Field(default=None, description="Type length")
    precision: int | None = Field(default=None, description="Numeric precision")
    scale: int | None = Field(default=None, description="Numeric scale")
    nullable: bool = Field(default=True, description="Accepts NULL values")
    default_value: str | None = Field(
        default=None, alias="defaultValue", description="Default value expression"
    )
    comment: str | None = Field(default=None, description="Column comment")
    is_pk: bool = Field(default=False, alias="isPk", description="Is primary key")
    auto_increment: bool = Field(
        default=False, alias="autoIncrement", description="Is auto increment/identity"
    )
    position: int = Field(default=0, description="Column position in table")


class Table(BaseModel):
    """
    Table metadata model.

    Column order is significant: it defines the column order of every
    generated statement.
    """

    model_config = ConfigDict(frozen=True)

    schema_name: str = Field(..., min_length=1, alias="schema", description="Schema name")
    name: str = Field(..., min_length=1, description="Table name")
    columns: tuple[Column, ...] = Field(default=(), description="Ordered table columns")
    comment: str | None = Field(default=None, description="Table comment")

    @property
    def qualified_name(self) -> str:
        """Unquoted ``schema.table`` name."""
        return f"{self.schema_name}.{self.name}"

    def get_column(self, name: str) -> Column | None:
        """Get column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def get_pk_columns(self) -> list[Column]:
        """Get primary key columns."""
        return [col for col in self.columns if col.is_pk]


class QueryOption(BaseModel):
    """
    Filter, ordering and pagination options of a data query.

    ``where`` and ``order`` are inserted verbatim; the limits are
    string-encoded integers.
    """

    where: str | None = None
    order: str | None = None
    limit_start: str | None = Field(default=None, alias="limitStart")
    limit_end: str | None = Field(default=None, alias="limitEnd")


class QueryData(BaseModel):
    """Target table and options of a data browsing query."""

    schema_name: str = Field(..., min_length=1, alias="schemaName")
    table_name: str = Field(..., min_length=1, alias="tableName")
    option: QueryOption = Field(default_factory=QueryOption)
