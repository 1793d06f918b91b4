from __future__ import annotations

import pytest

from easymeta.drivers import (
    DriverRegistry,
    MySqlDriver,
    OracleDriver,
    PostgreSqlDriver,
    UnknownDriverError,
    driver_type_for_dialect,
)


def test_default_registry_contains_bundled_drivers(registry: DriverRegistry) -> None:
    assert registry.supported_types() == ["PostgreSql", "MySql", "Oracle"]
    assert len(registry) == 3


def test_lookup_by_vendor_code(registry: DriverRegistry) -> None:
    assert isinstance(registry.get("PostgreSql"), PostgreSqlDriver)
    assert isinstance(registry.get("MySql"), MySqlDriver)
    assert isinstance(registry.get("Oracle"), OracleDriver)


def test_lookup_is_case_insensitive(registry: DriverRegistry) -> None:
    assert registry.get("postgresql") is registry.get("POSTGRESQL")
    assert "mysql" in registry
    assert "sqlite" not in registry


def test_unknown_driver_raises(registry: DriverRegistry) -> None:
    with pytest.raises(UnknownDriverError, match="Available types: PostgreSql, MySql, Oracle"):
        registry.get("Db2")


def test_unknown_driver_is_value_error(registry: DriverRegistry) -> None:
    with pytest.raises(ValueError):
        registry.get("Db2")


def test_duplicate_types_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate driver"):
        DriverRegistry([PostgreSqlDriver(), PostgreSqlDriver()])


def test_registries_are_independent() -> None:
    only_pg = DriverRegistry([PostgreSqlDriver()])

    assert only_pg.supported_types() == ["PostgreSql"]
    with pytest.raises(UnknownDriverError):
        only_pg.get("MySql")


def test_registry_iterates_drivers(registry: DriverRegistry) -> None:
    assert [driver.type for driver in registry] == registry.supported_types()


@pytest.mark.parametrize(
    ("dialect", "expected"),
    [("postgresql", "PostgreSql"), ("mysql", "MySql"), ("mariadb", "MySql"), ("oracle", "Oracle")],
)
def test_driver_type_for_dialect(dialect: str, expected: str) -> None:
    assert driver_type_for_dialect(dialect) == expected


def test_driver_type_for_unknown_dialect() -> None:
    with pytest.raises(UnknownDriverError):
        driver_type_for_dialect("sqlite")
