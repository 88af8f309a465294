"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from sqlalchemy import Column
from sqlalchemy import Engine
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import String
from sqlalchemy import Table
from sqlalchemy import create_engine

from namerec.condsql import WhereClauseBuilder
from namerec.condsql import reset_default_config


@pytest.fixture
def builder() -> WhereClauseBuilder:
    """Create builder with default configuration."""
    return WhereClauseBuilder()


@pytest.fixture
def metadata() -> MetaData:
    """Create test metadata with customers and orders."""
    metadata = MetaData()

    Table(
        'customers',
        metadata,
        Column('id', Integer, primary_key=True),
        Column('name', String(100), nullable=False),
        Column('country', String(2), nullable=False),
    )
    Table(
        'orders',
        metadata,
        Column('id', Integer, primary_key=True),
        Column('customer_id', Integer, ForeignKey('customers.id'), nullable=False),
        Column('status', String(20), nullable=False),
        Column('total', Integer, nullable=False),
        Column('note', String(100), nullable=True),
    )

    return metadata


@pytest.fixture
def engine(metadata: MetaData) -> Iterator[Engine]:
    """Create in-memory SQLite engine with sample rows."""
    engine = create_engine('sqlite://')
    metadata.create_all(engine)

    customers = metadata.tables['customers']
    orders = metadata.tables['orders']
    with engine.begin() as conn:
        conn.execute(customers.insert(), [
            {'id': 1, 'name': 'Alice', 'country': 'NL'},
            {'id': 2, 'name': 'Bob', 'country': 'DE'},
        ])
        conn.execute(orders.insert(), [
            {'id': 1, 'customer_id': 1, 'status': 'new', 'total': 10, 'note': None},
            {'id': 2, 'customer_id': 1, 'status': 'paid', 'total': 50, 'note': 'gift wrap'},
            {'id': 3, 'customer_id': 2, 'status': 'paid', 'total': 120, 'note': None},
            {'id': 4, 'customer_id': 2, 'status': 'cancelled', 'total': 75, 'note': 'gift card'},
        ])

    yield engine

    engine.dispose()


@pytest.fixture(autouse=True)
def reset_builder_config() -> None:
    """Reset default builder configuration before each test."""
    reset_default_config()
