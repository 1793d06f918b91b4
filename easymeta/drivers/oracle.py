"""
Oracle dialect driver for EasyMeta.

Oracle schemas are database users, so schema creation is not expressible
as a plain statement and is reported as unsupported.
"""

from easymeta.drivers.base import (
    Driver,
    UnsupportedOperationError,
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

ORACLE_TYPES: dict[str, ColumnType] = {
    "varchar2": ColumnType.STRING,
    "nvarchar2": ColumnType.STRING,
    "varchar": ColumnType.STRING,
    "char": ColumnType.STRING,
    "nchar": ColumnType.STRING,
    "clob": ColumnType.STRING,
    "nclob": ColumnType.STRING,
    "long": ColumnType.STRING,
    "rowid": ColumnType.STRING,
    "smallint": ColumnType.SHORT,
    "integer": ColumnType.INTEGER,
    "int": ColumnType.INTEGER,
    "number": ColumnType.DECIMAL,
    "decimal": ColumnType.DECIMAL,
    "numeric": ColumnType.DECIMAL,
    "binary_float": ColumnType.FLOAT,
    "binary_double": ColumnType.DOUBLE,
    "float": ColumnType.DOUBLE,
    "date": ColumnType.TIMESTAMP,
    "timestamp": ColumnType.TIMESTAMP,
    "timestamp with time zone": ColumnType.TIMESTAMP,
    "timestamp with local time zone": ColumnType.TIMESTAMP,
    "blob": ColumnType.BYTES,
    "raw": ColumnType.BYTES,
    "long raw": ColumnType.BYTES,
    "json": ColumnType.JSON,
}

SEQUENCE_MARKERS = ("nextval", "identity")


def _quote(identifier: str) -> str:
    return f'"{identifier}"'


class OracleDriver(Driver):
    """
    Oracle dialect driver.

    Handles:
    - Oracle type names (NUMBER, VARCHAR2, CLOB, ...)
    - Double-quoted identifiers and COMMENT ON statements
    - ``fetch first n rows only`` pagination
    """

    @property
    def type(self) -> str:
        return "Oracle"

    @property
    def name(self) -> str:
        return "Oracle"

    def type_convert(self, native_type: str) -> ColumnType:
        return ORACLE_TYPES.get(normalize_type_name(native_type), ColumnType.UNKNOWN)

    def query_schema_create_statement(self, schema_name: str) -> str:
        raise UnsupportedOperationError(
            f"Oracle cannot create schema '{schema_name}': schemas are created as users"
        )

    def select_all_statement(self, table: Table) -> str:
        return select_all_text(table, _quote)

    def create_table_statement(self, table: Table) -> str:
        qualified = self._qualified(table)
        column_lines = []
        comments = []

        for column in table.columns:
            line = f"  {_quote(column.name)} {column.type}{type_suffix(column)}"
            # DEFAULT has to precede inline constraints in Oracle
            if not is_blank(column.default_value) and not is_sequence_default(
                column.default_value, SEQUENCE_MARKERS
            ):
                line += f" DEFAULT {column.default_value}"
            if not column.nullable:
                line += " NOT NULL"
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
        _, limit_end = resolve_limits(query_data.option)
        return f"{query_prefix(query_data)} fetch first {limit_end} rows only"

    def drop_table_statement(self, table: Table) -> str:
        return f"DROP TABLE {self._qualified(table)} PURGE;"

    def truncate_table_statement(self, table: Table) -> str:
        return f"TRUNCATE TABLE {self._qualified(table)};"

    def _qualified(self, table: Table) -> str:
        return f"{_quote(table.schema_name)}.{_quote(table.name)}"
