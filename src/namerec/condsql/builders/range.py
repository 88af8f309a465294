"""Range builder (BETWEEN, NOT BETWEEN)."""

from typing import Any

from namerec.condsql.constants import PLACEHOLDER
from namerec.condsql.constants import RANGE_OPERATORS
from namerec.condsql.constants import ConditionOperator
from namerec.condsql.exceptions import ConditionInvariantError
from namerec.condsql.exceptions import TypeMismatchError
from namerec.condsql.exceptions import WrongArityError
from namerec.condsql.types import BuildResult

_RANGE_ARITY = 2


def build_range(
    column: str,
    operator: ConditionOperator,
    value: Any,
    path: str = '',
) -> BuildResult:
    """
    Build `column BETWEEN ? AND ?` from a two-element list.

    Raises:
        TypeMismatchError: If the operand is not a list
        WrongArityError: If the list does not have exactly two elements
    """
    if operator not in RANGE_OPERATORS:
        raise ConditionInvariantError(f'Not a range operator: {operator.value}')

    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(
            expected='a list of values',
            actual=type(value).__name__,
            context='The BETWEEN and NOT BETWEEN operators',
            path=path,
        )
    if len(value) != _RANGE_ARITY:
        raise WrongArityError(actual=len(value), expected=_RANGE_ARITY, path=path)

    low, high = value
    return [f'{column} {operator.value} {PLACEHOLDER} AND {PLACEHOLDER}'], [low, high]
