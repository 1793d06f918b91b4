"""
MySQL dialect driver for EasyMeta.

Generates MySQL DDL, select and paginated query text. Identifiers are
back-tick quoted and comments are written inline with the column and
table definitions.
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

MYSQL_TYPES: dict[str, ColumnType] = {
    "varchar": ColumnType.STRING,
    "char": ColumnType.STRING,
    "tinytext": ColumnType.STRING,
    "text": ColumnType.STRING,
    "mediumtext": ColumnType.STRING,
    "longtext": ColumnType.STRING,
    "enum": ColumnType.STRING,
    "set": ColumnType.STRING,
    "bool": ColumnType.BOOLEAN,
    "boolean": ColumnType.BOOLEAN,
    "tinyint": ColumnType.SHORT,
    "smallint": ColumnType.SHORT,
    "mediumint": ColumnType.INTEGER,
    "int": ColumnType.INTEGER,
    "integer": ColumnType.INTEGER,
    "year": ColumnType.INTEGER,
    "bigint": ColumnType.LONG,
    "float": ColumnType.FLOAT,
    "double": ColumnType.DOUBLE,
    "double precision": ColumnType.DOUBLE,
    "real": ColumnType.DOUBLE,
    "decimal": ColumnType.DECIMAL,
    "numeric": ColumnType.DECIMAL,
    "date": ColumnType.DATE,
    "time": ColumnType.TIME,
    "datetime": ColumnType.TIMESTAMP,
    "timestamp": ColumnType.TIMESTAMP,
    "bit": ColumnType.BYTES,
    "binary": ColumnType.BYTES,
    "varbinary": ColumnType.BYTES,
    "tinyblob": ColumnType.BYTES,
    "blob": ColumnType.BYTES,
    "mediumblob": ColumnType.BYTES,
    "longblob": ColumnType.BYTES,
    "json": ColumnType.JSON,
}

SEQUENCE_MARKERS = ("auto_increment",)
BOOLEAN_TYPES = ("tinyint(1)", "bit(1)", "bit")
TYPE_ATTRIBUTES = (" unsigned", " zerofill")


def _quote(identifier: str) -> str:
    return f"`{identifier}`"


class MySqlDriver(Driver):
    """
    MySQL dialect driver.

    Handles:
    - Type names with display widths and unsigned/zerofill attributes
    - Back-tick quoted identifiers
    - Inline COMMENT clauses and AUTO_INCREMENT columns
    - ``limit start,end`` pagination
    """

    @property
    def type(self) -> str:
        return "MySql"

    @property
    def name(self) -> str:
        return "MySql"

    def type_convert(self, native_type: str) -> ColumnType:
        """Map a MySQL type name to a ColumnType; ``tinyint(1)`` and ``bit(1)`` are booleans."""
        if native_type.strip().lower().replace(" ", "") in BOOLEAN_TYPES:
            return ColumnType.BOOLEAN
        normalized = normalize_type_name(native_type)
        if normalized.startswith(("enum", "set")):
            # enum('a','b') keeps its value list after modifier removal
            normalized = normalized.split("(", 1)[0]
        for attribute in TYPE_ATTRIBUTES:
            normalized = normalized.replace(attribute, "")
        return MYSQL_TYPES.get(normalized, ColumnType.UNKNOWN)

    def query_schema_create_statement(self, schema_name: str) -> str:
        return f"CREATE SCHEMA {schema_name}"

    def select_all_statement(self, table: Table) -> str:
        return select_all_text(table, _quote)

    def create_table_statement(self, table: Table) -> str:
        lines = []
        for column in table.columns:
            line = f"  {_quote(column.name)} {column.type}{type_suffix(column)}"
            if not column.nullable:
                line += " NOT NULL"
            if column.auto_increment:
                line += " AUTO_INCREMENT"
            elif not is_blank(column.default_value) and not is_sequence_default(
                column.default_value, SEQUENCE_MARKERS
            ):
                line += f" DEFAULT {column.default_value}"
            column_comment = clean_comment(column.comment)
            if column_comment:
                line += f" COMMENT '{column_comment}'"
            lines.append(line)

        pk_columns = table.get_pk_columns()
        if pk_columns:
            lines.append(f"  PRIMARY KEY ({', '.join(_quote(c.name) for c in pk_columns)})")

        sql = f"CREATE TABLE {self._qualified(table)} (\n" + ",\n".join(lines) + "\n)"
        table_comment = clean_comment(table.comment)
        if table_comment:
            sql += f" COMMENT='{table_comment}'"

        logger.debug(f"Generated CREATE TABLE for {table.qualified_name}")
        return sql + ";"

    def query_data_statement(self, query_data: QueryData) -> str:
        limit_start, limit_end = resolve_limits(query_data.option)
        return f"{query_prefix(query_data)} limit {limit_start},{limit_end}"

    def drop_table_statement(self, table: Table) -> str:
        return f"DROP TABLE {self._qualified(table)};"

    def truncate_table_statement(self, table: Table) -> str:
        return f"TRUNCATE TABLE {self._qualified(table)};"

    def _qualified(self, table: Table) -> str:
        return f"{_quote(table.schema_name)}.{_quote(table.name)}"
