"""
Dialect drivers for EasyMeta.

One driver per database vendor, selected through an explicit
DriverRegistry built at startup.
"""

from easymeta.drivers.base import Driver, UnknownDriverError, UnsupportedOperationError
from easymeta.drivers.mysql import MySqlDriver
from easymeta.drivers.oracle import OracleDriver
from easymeta.drivers.postgresql import PostgreSqlDriver
from easymeta.drivers.registry import DriverRegistry, driver_type_for_dialect


def create_default_registry() -> DriverRegistry:
    """Build a registry holding every bundled driver."""
    return DriverRegistry([PostgreSqlDriver(), MySqlDriver(), OracleDriver()])


__all__ = [
    "Driver",
    "DriverRegistry",
    "MySqlDriver",
    "OracleDriver",
    "PostgreSqlDriver",
    "UnknownDriverError",
    "UnsupportedOperationError",
    "create_default_registry",
    "driver_type_for_dialect",
]
