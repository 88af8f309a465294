"""Null and truth check builders (IS NULL, IS NOT NULL, IS, IS NOT)."""

from typing import Any

from namerec.condsql.constants import NULL_CHECK_OPERATORS
from namerec.condsql.constants import PLACEHOLDER
from namerec.condsql.constants import TRUTH_CHECK_OPERATORS
from namerec.condsql.constants import ConditionOperator
from namerec.condsql.exceptions import ConditionInvariantError
from namerec.condsql.exceptions import TypeMismatchError
from namerec.condsql.types import BuildResult


def build_null_check(
    column: str,
    operator: ConditionOperator,
    value: Any = None,
    path: str = '',
) -> BuildResult:
    """Build `column IS [NOT] NULL`; the operand is ignored."""
    if operator not in NULL_CHECK_OPERATORS:
        raise ConditionInvariantError(f'Not a null check operator: {operator.value}')
    return [f'{column} {operator.value}'], []


def build_truth_check(
    column: str,
    operator: ConditionOperator,
    value: Any,
    path: str = '',
) -> BuildResult:
    """
    Build `column IS [NOT] ?` bound to 'TRUE' or 'FALSE'.

    Raises:
        TypeMismatchError: If the operand is not a bool
    """
    if operator not in TRUTH_CHECK_OPERATORS:
        raise ConditionInvariantError(f'Not a truth check operator: {operator.value}')

    if not isinstance(value, bool):
        raise TypeMismatchError(
            expected='a boolean',
            actual=type(value).__name__,
            context='The IS and IS NOT operators',
            path=path,
        )
    return [f'{column} {operator.value} {PLACEHOLDER}'], ['TRUE' if value else 'FALSE']
