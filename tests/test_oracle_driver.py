from __future__ import annotations

import pytest

from easymeta.drivers import OracleDriver, UnsupportedOperationError
from easymeta.models.schema import Column, ColumnType, QueryData, QueryOption, Table


@pytest.fixture
def driver() -> OracleDriver:
    return OracleDriver()


def test_create_schema_is_unsupported(driver: OracleDriver) -> None:
    with pytest.raises(UnsupportedOperationError):
        driver.query_schema_create_statement("HR")


def test_unsupported_operation_is_not_implemented_error(driver: OracleDriver) -> None:
    with pytest.raises(NotImplementedError):
        driver.query_schema_create_statement("HR")


def test_select_all_statement(driver: OracleDriver, orders_table: Table) -> None:
    assert driver.select_all_statement(orders_table) == (
        "SELECT\n"
        '    "id"  -- Order id\n'
        '    ,"customer"\n'
        '    ,"amount"  -- Order total amount\n'
        '    ,"note"  -- Free text\n'
        'FROM "sales"."orders"; -- Customer orders'
    )


def test_create_table_puts_default_before_not_null(driver: OracleDriver) -> None:
    table = Table(
        schema="HR",
        name="EMP",
        comment="Employees",
        columns=[
            Column(name="ID", type="NUMBER", precision=10, scale=0, length=10, nullable=False),
            Column(
                name="SALARY",
                type="NUMBER",
                precision=8,
                scale=2,
                default_value="0",
                nullable=False,
                comment="Monthly",
            ),
            Column(name="SEQ", type="NUMBER", default_value='"HR"."EMP_SEQ".NEXTVAL'),
        ],
    )

    assert driver.create_table_statement(table) == (
        'CREATE TABLE "HR"."EMP" (\n'
        '  "ID" NUMBER(10) NOT NULL,\n'
        '  "SALARY" NUMBER(8,2) DEFAULT 0 NOT NULL,\n'
        '  "SEQ" NUMBER\n'
        ");\n"
        "\n"
        'COMMENT ON COLUMN "HR"."EMP"."SALARY" IS \'Monthly\';\n'
        'COMMENT ON TABLE "HR"."EMP" IS \'Employees\';'
    )


def test_query_data_fetch_first(driver: OracleDriver) -> None:
    assert (
        driver.query_data_statement(QueryData(schema_name="HR", table_name="EMP"))
        == "select * from HR.EMP fetch first 100 rows only"
    )

    query_data = QueryData(
        schema_name="HR",
        table_name="EMP",
        option=QueryOption(where="ID=1", order="ID desc", limit_end="5"),
    )
    assert (
        driver.query_data_statement(query_data)
        == "select * from HR.EMP where ID=1 order by ID desc fetch first 5 rows only"
    )


def test_drop_table_purges(driver: OracleDriver, plain_table: Table) -> None:
    assert driver.drop_table_statement(plain_table) == 'DROP TABLE "S"."T" PURGE;'


@pytest.mark.parametrize(
    ("native_type", "expected"),
    [
        ("VARCHAR2", ColumnType.STRING),
        ("CLOB", ColumnType.STRING),
        ("NUMBER(10,2)", ColumnType.DECIMAL),
        ("BINARY_DOUBLE", ColumnType.DOUBLE),
        ("DATE", ColumnType.TIMESTAMP),
        ("TIMESTAMP(6) WITH TIME ZONE", ColumnType.TIMESTAMP),
        ("LONG RAW", ColumnType.BYTES),
        ("SDO_GEOMETRY", ColumnType.UNKNOWN),
    ],
)
def test_type_convert(driver: OracleDriver, native_type: str, expected: ColumnType) -> None:
    assert driver.type_convert(native_type) == expected
