"""
Driver registry for EasyMeta.

Maps short vendor codes to dialect driver instances. A registry is built
once at startup from its drivers and is read-only afterwards, so it can be
shared between callers without synchronization.
"""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from easymeta.drivers.base import Driver, UnknownDriverError
from easymeta.utils.logger import get_logger

logger = get_logger(__name__)

DIALECT_DRIVER_TYPES = {
    "postgresql": "PostgreSql",
    "mysql": "MySql",
    "mariadb": "MySql",
    "oracle": "Oracle",
}


class DriverRegistry:
    """
    Immutable registry of dialect drivers keyed by vendor code.

    Lookups are case-insensitive, so ``"PostgreSql"`` and ``"postgresql"``
    resolve to the same driver.

    Usage:
        registry = DriverRegistry([PostgreSqlDriver(), MySqlDriver()])
        driver = registry.get("PostgreSql")
    """

    def __init__(self, drivers: Iterable[Driver]):
        """
        Build the registry.

        Args:
            drivers: Driver instances to register

        Raises:
            ValueError: If two drivers share a vendor code
        """
        registered: dict[str, Driver] = {}
        for driver in drivers:
            key = driver.type.lower()
            if key in registered:
                raise ValueError(f"Duplicate driver registered for type '{driver.type}'")
            registered[key] = driver
            logger.debug(f"Registered driver for {driver.type}: {driver.__class__.__name__}")
        self._drivers = MappingProxyType(registered)

    def get(self, driver_type: str) -> Driver:
        """
        Get the driver registered for a vendor code.

        Args:
            driver_type: Vendor code (e.g., 'PostgreSql', 'mysql')

        Returns:
            The registered driver

        Raises:
            UnknownDriverError: If no driver is registered for the code
        """
        driver = self._drivers.get(driver_type.lower())
        if driver is None:
            raise UnknownDriverError(
                f"No driver registered for type '{driver_type}'. "
                f"Available types: {', '.join(self.supported_types())}"
            )
        return driver

    def supported_types(self) -> list[str]:
        """Get vendor codes in registration order."""
        return [driver.type for driver in self._drivers.values()]

    def __contains__(self, driver_type: object) -> bool:
        return isinstance(driver_type, str) and driver_type.lower() in self._drivers

    def __iter__(self) -> Iterator[Driver]:
        return iter(self._drivers.values())

    def __len__(self) -> int:
        return len(self._drivers)


def driver_type_for_dialect(dialect_name: str) -> str:
    """
    Get the vendor code matching a SQLAlchemy dialect name.

    Raises:
        UnknownDriverError: If the dialect has no driver
    """
    try:
        return DIALECT_DRIVER_TYPES[dialect_name.lower()]
    except KeyError:
        raise UnknownDriverError(f"No driver available for dialect '{dialect_name}'") from None
