"""
Dialect driver interface for EasyMeta.

Defines the capability contract every database vendor implements to turn
the metadata models into vendor-correct SQL text, together with the small
string helpers the vendor implementations share.

Every operation is a pure function of its input: no connection is opened,
nothing is cached and the metadata objects are never modified.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from easymeta.models.schema import Column, ColumnType, QueryData, QueryOption, Table

DEFAULT_LIMIT_START = "0"
DEFAULT_LIMIT_END = "100"

_TYPE_MODIFIER = re.compile(r"\(\s*\d*\s*(?:,\s*-?\d+\s*)?\)")
_WHITESPACE = re.compile(r"\s+")


class UnknownDriverError(ValueError):
    """Raised when no driver is registered for a vendor code."""


class UnsupportedOperationError(NotImplementedError):
    """Raised when a vendor cannot express the requested statement."""


class Driver(ABC):
    """
    Abstract base class for database dialect drivers.

    One implementation exists per database vendor. Callers select an
    instance through a DriverRegistry and never branch on the vendor
    themselves.

    Usage:
        driver = registry.get("PostgreSql")
        ddl = driver.create_table_statement(table)
    """

    @property
    @abstractmethod
    def type(self) -> str:
        """Short vendor code the driver is registered under."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable driver name."""
        ...

    @abstractmethod
    def type_convert(self, native_type: str) -> ColumnType:
        """
        Map a vendor type name to the canonical column type.

        Args:
            native_type: Type name as reported by the vendor catalog

        Returns:
            Canonical type, or ColumnType.UNKNOWN when there is no mapping
        """
        ...

    @abstractmethod
    def query_schema_create_statement(self, schema_name: str) -> str:
        """
        Build the statement creating a schema.

        The schema name is inserted verbatim; identifier validation is the
        caller's responsibility.

        Raises:
            UnsupportedOperationError: If the vendor has no schema concept
        """
        ...

    @abstractmethod
    def select_all_statement(self, table: Table) -> str:
        """Build a SELECT listing every column of the table in order."""
        ...

    @abstractmethod
    def create_table_statement(self, table: Table) -> str:
        """Build the CREATE TABLE statement together with its comments."""
        ...

    @abstractmethod
    def query_data_statement(self, query_data: QueryData) -> str:
        """Build a filtered, ordered and limited data browsing query."""
        ...

    @abstractmethod
    def drop_table_statement(self, table: Table) -> str:
        """Build the DROP TABLE statement."""
        ...

    @abstractmethod
    def truncate_table_statement(self, table: Table) -> str:
        """Build the TRUNCATE TABLE statement."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type})"


def is_blank(value: str | None) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()


def strip_quotes(text: str) -> str:
    """Remove single and double quote characters from comment text."""
    return text.replace("'", "").replace('"', "")


def clean_comment(text: str | None) -> str | None:
    """Comment text with quotes stripped, or None when nothing is left."""
    if text is None:
        return None
    cleaned = strip_quotes(text).strip()
    return cleaned or None


def normalize_type_name(native_type: str) -> str:
    """
    Normalize a vendor type name for lookup.

    Lower-cases the name, drops length/precision modifiers and collapses
    whitespace, so ``"TIMESTAMP(6) WITHOUT TIME ZONE"`` becomes
    ``"timestamp without time zone"``.
    """
    name = _TYPE_MODIFIER.sub("", native_type.lower())
    return _WHITESPACE.sub(" ", name).strip()


def type_suffix(column: Column) -> str:
    """
    Length/precision suffix appended to a column type.

    ``(precision,scale)`` when both are positive, ``(length)`` when only a
    length is set, nothing otherwise.
    """
    if (column.precision or 0) > 0 and (column.scale or 0) > 0:
        return f"({column.precision},{column.scale})"
    if column.length is not None:
        return f"({column.length})"
    return ""


def is_sequence_default(default_value: str, markers: Iterable[str]) -> bool:
    """True when a default value is an auto-increment/sequence expression."""
    lowered = default_value.lower()
    return any(marker in lowered for marker in markers)


def resolve_limits(option: QueryOption) -> tuple[str, str]:
    """Limit bounds of a query option, defaulted to 0 and 100 when blank."""
    limit_start = DEFAULT_LIMIT_START if is_blank(option.limit_start) else option.limit_start
    limit_end = DEFAULT_LIMIT_END if is_blank(option.limit_end) else option.limit_end
    return limit_start, limit_end


def query_prefix(query_data: QueryData) -> str:
    """``select * from`` with the where and order by clauses of a query."""
    option = query_data.option
    sql = f"select * from {query_data.schema_name}.{query_data.table_name}"
    if not is_blank(option.where):
        sql += f" where {option.where}"
    if not is_blank(option.order):
        sql += f" order by {option.order}"
    return sql


def select_all_text(table: Table, quote: Callable[[str], str]) -> str:
    """
    SELECT listing every column of a table, one per line.

    Separator commas lead columns 2..N and each commented column ends with
    a ``-- comment`` line comment; the table comment follows the statement.
    """
    lines = ["SELECT"]
    for i, column in enumerate(table.columns):
        line = "    " + ("," if i > 0 else "") + quote(column.name)
        comment = clean_comment(column.comment)
        if comment:
            line += f"  -- {comment}"
        lines.append(line)

    from_clause = f"FROM {quote(table.schema_name)}.{quote(table.name)};"
    table_comment = clean_comment(table.comment)
    if table_comment:
        from_clause += f" -- {table_comment}"
    lines.append(from_clause)
    return "\n".join(lines)
