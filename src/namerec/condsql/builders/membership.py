"""Set membership builder (IN, NOT IN)."""

import logging
from decimal import Decimal
from typing import Any

from namerec.condsql.constants import MEMBERSHIP_OPERATORS
from namerec.condsql.constants import PLACEHOLDER
from namerec.condsql.constants import ConditionOperator
from namerec.condsql.exceptions import ConditionInvariantError
from namerec.condsql.exceptions import EmptyValueListError
from namerec.condsql.exceptions import InvalidElementTypeError
from namerec.condsql.exceptions import TypeMismatchError
from namerec.condsql.types import BuildResult

logger = logging.getLogger(__name__)

_ELEMENT_TYPES = (str, int, float, Decimal)


def is_membership_element(item: Any) -> bool:
    """Only strings and numbers may appear in an IN list; bool is not a number here."""
    return isinstance(item, _ELEMENT_TYPES) and not isinstance(item, bool)


def build_membership(
    column: str,
    operator: ConditionOperator,
    value: Any,
    path: str = '',
) -> BuildResult:
    """
    Build `column IN (?, ?, ...)` with one placeholder per element.

    Args:
        column: Rendered column identifier
        operator: IN or NOT IN
        value: List or tuple of strings / numbers
        path: Unquoted column name for error reporting

    Returns:
        Tuple of (fragments, values); values keep the input order

    Raises:
        TypeMismatchError: If the operand is not a list
        EmptyValueListError: If the list is empty
        InvalidElementTypeError: If an element is not a string or a number
    """
    if operator not in MEMBERSHIP_OPERATORS:
        raise ConditionInvariantError(f'Not a membership operator: {operator.value}')

    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(
            expected='a list of values',
            actual=type(value).__name__,
            context='The IN and NOT IN operators',
            path=path,
        )
    if not value:
        raise EmptyValueListError(operator.value, path)

    for index, item in enumerate(value):
        if not is_membership_element(item):
            raise InvalidElementTypeError(index, type(item).__name__, path)

    logger.debug(f'Processing {operator.value} operator with {len(value)} values')
    placeholders = ', '.join(PLACEHOLDER for _ in value)
    return [f'{column} {operator.value} ({placeholders})'], list(value)
