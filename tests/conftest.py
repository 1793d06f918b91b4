from __future__ import annotations

import pytest

from easymeta.drivers import DriverRegistry, create_default_registry
from easymeta.models.schema import Column, Table


@pytest.fixture
def registry() -> DriverRegistry:
    return create_default_registry()


@pytest.fixture
def orders_table() -> Table:
    return Table(
        schema="sales",
        name="orders",
        comment="Customer orders",
        columns=[
            Column(
                name="id",
                type="int8",
                nullable=False,
                default_value="nextval('orders_id_seq'::regclass)",
                comment="Order id",
                is_pk=True,
            ),
            Column(name="customer", type="varchar", length=64, nullable=False),
            Column(
                name="amount",
                type="numeric",
                length=12,
                precision=12,
                scale=2,
                default_value="0",
                comment="Order 'total' amount",
            ),
            Column(name="note", type="text", comment='Free "text"'),
        ],
    )


@pytest.fixture
def plain_table() -> Table:
    return Table(
        schema="S",
        name="T",
        columns=[
            Column(name="a", type="int4"),
            Column(name="b", type="text", comment="x"),
        ],
    )
