"""
PostgreSQL dialect driver for EasyMeta.

Generates PostgreSQL DDL, select and paginated query text from the
metadata models. Identifiers are double-quoted and comments are emitted
as separate COMMENT ON statements.
"""

from easymeta.drivers.base import (
    Driver,
    clean_comment,
    is_blank,
    is_sequence_default,
    normalize_type_name,
    query_prefix,
    resolve_limits,
    select_all_text,
    type_suffix,
)
from easymeta.models.schema import ColumnType, QueryData, Table
from easymeta.utils.logger import get_logger

logger = get_logger(__name__)

POSTGRESQL_TYPES: dict[str, ColumnType] = {
    "character varying": ColumnType.STRING,
    "varchar": ColumnType.STRING,
    "character": ColumnType.STRING,
    "char": ColumnType.STRING,
    "bpchar": ColumnType.STRING,
    "text": ColumnType.STRING,
    "name": ColumnType.STRING,
    "citext": ColumnType.STRING,
    "uuid": ColumnType.STRING,
    "xml": ColumnType.STRING,
    "inet": ColumnType.STRING,
    "cidr": ColumnType.STRING,
    "macaddr": ColumnType.STRING,
    "interval": ColumnType.STRING,
    "boolean": ColumnType.BOOLEAN,
    "bool": ColumnType.BOOLEAN,
    "smallint": ColumnType.SHORT,
    "int2": ColumnType.SHORT,
    "smallserial": ColumnType.SHORT,
    "serial2": ColumnType.SHORT,
    "integer": ColumnType.INTEGER,
    "int": ColumnType.INTEGER,
    "int4": ColumnType.INTEGER,
    "serial": ColumnType.INTEGER,
    "serial4": ColumnType.INTEGER,
    "bigint": ColumnType.LONG,
    "int8": ColumnType.LONG,
    "bigserial": ColumnType.LONG,
    "serial8": ColumnType.LONG,
    "oid": ColumnType.LONG,
    "real": ColumnType.FLOAT,
    "float4": ColumnType.FLOAT,
    "double precision": ColumnType.DOUBLE,
    "float8": ColumnType.DOUBLE,
    "float": ColumnType.DOUBLE,
    "numeric": ColumnType.DECIMAL,
    "decimal": ColumnType.DECIMAL,
    "money": ColumnType.DECIMAL,
    "date": ColumnType.DATE,
    "time": ColumnType.TIME,
    "time without time zone": ColumnType.TIME,
    "time with time zone": ColumnType.TIME,
    "timetz": ColumnType.TIME,
    "timestamp": ColumnType.TIMESTAMP,
    "timestamp without time zone": ColumnType.TIMESTAMP,
    "timestamp with time zone": ColumnType.TIMESTAMP,
    "timestamptz": ColumnType.TIMESTAMP,
    "bytea": ColumnType.BYTES,
    "json": ColumnType.JSON,
    "jsonb": ColumnType.JSON,
}

SEQUENCE_MARKERS = ("nextval",)


def _quote(identifier: str) -> str:
    return f'"{identifier}"'


class PostgreSqlDriver(Driver):
    """
    PostgreSQL dialect driver.

    Handles:
    - Type names and aliases from pg_catalog/information_schema
    - Double-quoted identifiers
    - COMMENT ON COLUMN / COMMENT ON TABLE statements
    - ``limit`` pagination
    """

    @property
    def type(self) -> str:
        return "PostgreSql"

    @property
    def name(self) -> str:
        return "PostgreSql"

    def type_convert(self, native_type: str) -> ColumnType:
        """Map a PostgreSQL type name, including array types, to a ColumnType."""
        normalized = normalize_type_name(native_type)
        if normalized.endswith("[]") or normalized.startswith("_"):
            return ColumnType.ARRAY
        return POSTGRESQL_TYPES.get(normalized, ColumnType.UNKNOWN)

    def query_schema_create_statement(self, schema_name: str) -> str:
        return f"CREATE SCHEMA {schema_name}"

    def select_all_statement(self, table: Table) -> str:
        return select_all_text(table, _quote)

    def create_table_statement(self, table: Table) -> str:
        qualified = self._qualified(table)
        column_lines = []
        comments = []

        for column in table.columns:
            line = f"  {_quote(column.name)} {column.type}{type_suffix(column)}"
            if not column.nullable:
                line += " NOT NULL"
            if not is_blank(column.default_value) and not is_sequence_default(
                column.default_value, SEQUENCE_MARKERS
            ):
                line += f" DEFAULT {column.default_value}"
            column_lines.append(line)

            column_comment = clean_comment(column.comment)
            if column_comment:
                comments.append(
                    f"COMMENT ON COLUMN {qualified}.{_quote(column.name)} IS '{column_comment}';"
                )

        table_comment = clean_comment(table.comment)
        if table_comment:
            comments.append(f"COMMENT ON TABLE {qualified} IS '{table_comment}';")

        sql = f"CREATE TABLE {qualified} (\n" + ",\n".join(column_lines) + "\n);"
        if comments:
            sql += "\n\n" + "\n".join(comments)

        logger.debug(f"Generated CREATE TABLE for {table.qualified_name}")
        return sql

    def query_data_statement(self, query_data: QueryData) -> str:
        # Only the upper bound is emitted; limit_start is defaulted but unused.
        _, limit_end = resolve_limits(query_data.option)
        return f"{query_prefix(query_data)} limit {limit_end}"

    def drop_table_statement(self, table: Table) -> str:
        return f"DROP TABLE {self._qualified(table)};"

    def truncate_table_statement(self, table: Table) -> str:
        return f"TRUNCATE TABLE {self._qualified(table)};"

    def _qualified(self, table: Table) -> str:
        return f"{_quote(table.schema_name)}.{_quote(table.name)}"
