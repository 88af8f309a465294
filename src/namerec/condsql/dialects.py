"""Identifier rendering for WHERE fragments."""

import sqlglot.expressions as exp
from sqlglot.dialects.dialect import Dialect

from namerec.condsql.types import IdentifierQuoter


def plain_identifier(column: str) -> str:
    """Return the column name as given."""
    return column


class SqlglotQuoter:
    """
    Quote identifiers the way a sqlglot dialect does.

    Each dotted part is quoted separately, so 'orders.status' becomes
    '"orders"."status"' for postgres and '`orders`.`status`' for mysql.
    """

    def __init__(self, dialect: str) -> None:
        """
        Initialize quoter.

        Args:
            dialect: sqlglot dialect name (postgres, mysql, sqlite, tsql, ...)

        Raises:
            ValueError: If sqlglot does not know the dialect
        """
        self.dialect = dialect
        self._dialect = Dialect.get_or_raise(dialect)

    def __call__(self, column: str) -> str:
        return '.'.join(
            exp.to_identifier(part, quoted=True).sql(dialect=self._dialect)
            for part in column.split('.')
        )

    def __repr__(self) -> str:
        return f'SqlglotQuoter({self.dialect!r})'


def get_quoter(dialect: str | None = None) -> IdentifierQuoter:
    """
    Get identifier renderer for a dialect.

    Args:
        dialect: sqlglot dialect name, or None to leave identifiers untouched

    Returns:
        Callable rendering a (possibly dotted) column name
    """
    if dialect is None:
        return plain_identifier
    return SqlglotQuoter(dialect)
