"""Accumulating WHERE clause builder."""

import logging
from collections.abc import Mapping
from typing import Any

from namerec.condsql.aggregator import build_all
from namerec.condsql.config import BuilderConfig
from namerec.condsql.config import get_default_config
from namerec.condsql.types import WhereClause

logger = logging.getLogger(__name__)


class WhereClauseBuilder:
    """
    Collect conjunctive WHERE conditions across calls.

    Each call to add_conditions() appends its fragments and values to the
    builder's state. A failing call leaves the state untouched.

    Not thread-safe: use one builder per query under construction.

    Example:
        >>> builder = WhereClauseBuilder()
        >>> builder.add_conditions({'status': ['new', 'paid'], 'deleted_at': None})
        >>> builder.clauses
        ('status IN (?, ?)', 'deleted_at IS NULL')
        >>> builder.values
        ('new', 'paid')
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        """
        Initialize builder.

        Args:
            config: Builder configuration (None = current default configuration)
        """
        self.config = config or get_default_config()
        self._clauses: list[str] = []
        self._values: list[Any] = []

    @property
    def clauses(self) -> tuple[str, ...]:
        """Accumulated WHERE fragments."""
        return tuple(self._clauses)

    @property
    def values(self) -> tuple[Any, ...]:
        """Accumulated bound values, in placeholder order."""
        return tuple(self._values)

    def add_conditions(self, conditions: Mapping[str, Any]) -> None:
        """
        Add conditions to the builder.

        Args:
            conditions: Mapping of column name to condition value (can be nested)

        Raises:
            ConditionError: If any condition is invalid
        """
        clauses, values = build_all(conditions, prefix=None, quoter=self.config.quoter)
        self._clauses.extend(clauses)
        self._values.extend(values)
        logger.debug(f'Added {len(clauses)} conditions, {len(self._clauses)} in total')

    def where(self, conditions: Mapping[str, Any] | None = None) -> None:
        """Add conditions to the builder (None adds nothing)."""
        self.add_conditions(conditions if conditions is not None else {})

    def build(self) -> WhereClause:
        """
        Get a snapshot of the accumulated state.

        Returns:
            WhereClause with the current fragments and values
        """
        return WhereClause(clauses=self.clauses, values=self.values)

    def reset(self) -> None:
        """Clear accumulated fragments and values."""
        self._clauses = []
        self._values = []

    def __len__(self) -> int:
        return len(self._clauses)

    def __repr__(self) -> str:
        return f'WhereClauseBuilder(clauses={self._clauses!r}, values={self._values!r})'
