"""Walk a condition set and collect WHERE fragments with their bound values."""

import logging
from collections.abc import Mapping
from typing import Any

from namerec.condsql.dispatcher import classify_and_build
from namerec.condsql.exceptions import TypeMismatchError
from namerec.condsql.types import BuildResult
from namerec.condsql.types import IdentifierQuoter
from namerec.condsql.validators import validate_value

logger = logging.getLogger(__name__)


def build_all(
    conditions: Mapping[str, Any],
    prefix: str | None = None,
    quoter: IdentifierQuoter | None = None,
) -> BuildResult:
    """
    Build WHERE fragments and values for every column of a condition set.

    Columns are processed in insertion order. Nested mappings are expanded
    with the outer key as a dotted prefix, so {'a': {'b': 1}} and {'a.b': 1}
    give the same result.

    Args:
        conditions: Mapping of column name to condition value
        prefix: Dotted prefix for the column names (None or '' for none)
        quoter: Identifier renderer (defaults to plain names)

    Returns:
        Tuple of (fragments, values)

    Raises:
        ConditionError: On the first invalid condition; nothing is returned
    """
    if not isinstance(conditions, Mapping):
        raise TypeMismatchError(
            expected='a mapping of column names to values',
            actual=type(conditions).__name__,
            context='A condition set',
            path=prefix or '',
        )

    clauses: list[str] = []
    values: list[Any] = []

    for key, value in conditions.items():
        if not isinstance(key, str):
            raise TypeMismatchError(
                expected='a string',
                actual=type(key).__name__,
                context='A column name',
                path=prefix or '',
            )
        column = f'{prefix}.{key}' if prefix else key

        validate_value(value, path=column)
        sub_clauses, sub_values = classify_and_build(column, value, quoter)

        clauses.extend(sub_clauses)
        values.extend(sub_values)

    logger.debug(f'Built {len(clauses)} conditions with {len(values)} values (prefix={prefix!r})')
    return clauses, values
