"""Basic comparison builder (=, !=, <>, <=>, <, <=, >, >=, LIKE, NOT LIKE)."""

from collections.abc import Mapping
from collections.abc import Set
from typing import Any

from namerec.condsql.constants import COMPARISON_OPERATORS
from namerec.condsql.constants import PLACEHOLDER
from namerec.condsql.constants import ConditionOperator
from namerec.condsql.exceptions import ConditionInvariantError
from namerec.condsql.exceptions import TypeMismatchError
from namerec.condsql.types import BuildResult


def build_basic_comparison(
    column: str,
    operator: ConditionOperator,
    value: Any,
    path: str = '',
) -> BuildResult:
    """
    Build `column <op> ?` bound to a single scalar.

    Raises:
        TypeMismatchError: If the operand is a list, a set or a mapping
    """
    if operator not in COMPARISON_OPERATORS:
        raise ConditionInvariantError(f'Not a comparison operator: {operator.value}')

    if isinstance(value, (list, tuple, Set, Mapping)):
        raise TypeMismatchError(
            expected='a scalar value',
            actual=type(value).__name__,
            context=f'The {operator.value} operator',
            path=path,
        )

    return [f'{column} {operator.value} {PLACEHOLDER}'], [value]
