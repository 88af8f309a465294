"""
Basic usage example for condsql.

This example demonstrates:
1. Building WHERE fragments from a nested condition set
2. Accumulating conditions across calls
3. Executing the result with SQLAlchemy on SQLite
"""

from sqlalchemy import Column
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import String
from sqlalchemy import Table
from sqlalchemy import create_engine

from namerec.condsql import BuilderConfig
from namerec.condsql import ConditionError
from namerec.condsql import WhereClauseBuilder

# Define schema
metadata = MetaData()

customers_table = Table(
    'customers',
    metadata,
    Column('id', Integer, primary_key=True),
    Column('country', String(2), nullable=False),
)

orders_table = Table(
    'orders',
    metadata,
    Column('id', Integer, primary_key=True),
    Column('customer_id', Integer, ForeignKey('customers.id'), nullable=False),
    Column('status', String(20), nullable=False),
    Column('total', Integer, nullable=False),
)


def main() -> None:
    """Run example."""
    engine = create_engine('sqlite://')
    metadata.create_all(engine)

    with engine.begin() as conn:
        conn.execute(customers_table.insert(), [{'id': 1, 'country': 'NL'}, {'id': 2, 'country': 'DE'}])
        conn.execute(orders_table.insert(), [
            {'id': 1, 'customer_id': 1, 'status': 'new', 'total': 10},
            {'id': 2, 'customer_id': 1, 'status': 'paid', 'total': 50},
            {'id': 3, 'customer_id': 2, 'status': 'paid', 'total': 120},
        ])

    # Conditions accumulate across calls and are joined with AND
    builder = WhereClauseBuilder(BuilderConfig(dialect='sqlite'))
    builder.add_conditions({
        'orders': {
            'status': ['new', 'paid'],
            'total': {'_operator': 'BETWEEN', '_value': [20, 200]},
        },
    })
    builder.add_conditions({'customers': {'country': 'NL'}})

    clause = builder.build()
    print('WHERE', clause.sql)
    print('params:', clause.values)

    sql = (
        'SELECT orders.id FROM orders '
        'JOIN customers ON customers.id = orders.customer_id '
        f'WHERE {clause.sql}'
    )
    with engine.connect() as conn:
        print('order ids:', conn.exec_driver_sql(sql, clause.values).scalars().all())

    # Invalid conditions raise and leave the builder unchanged
    try:
        builder.add_conditions({'orders': {'status': []}})
    except ConditionError as e:
        print(f'Rejected: {e}')
    print('still', len(builder), 'conditions')

    engine.dispose()


if __name__ == '__main__':
    main()
