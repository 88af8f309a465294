"""Operator and value shape validation."""

import logging
from collections.abc import Mapping
from typing import Any

from namerec.condsql.constants import MISSING
from namerec.condsql.constants import ConditionField
from namerec.condsql.constants import ConditionOperator
from namerec.condsql.exceptions import IncompleteCustomOperatorError
from namerec.condsql.exceptions import MissingValueError
from namerec.condsql.exceptions import UnsupportedOperatorError

logger = logging.getLogger(__name__)


def has_marker(value: Mapping[str, Any], marker: ConditionField) -> bool:
    """Check whether a custom-operator marker key is present and not MISSING."""
    return value.get(marker.value, MISSING) is not MISSING


def validate_operator(operator: Any, path: str = '') -> ConditionOperator:
    """
    Check an operator against the whitelist.

    Matching is exact: 'like' is not 'LIKE'.

    Args:
        operator: Operator taken from the condition set
        path: Column the operator applies to (for error reporting)

    Returns:
        The matching ConditionOperator member

    Raises:
        UnsupportedOperatorError: If the operator is not supported
    """
    if isinstance(operator, str):
        try:
            return ConditionOperator(operator)
        except ValueError:
            pass

    logger.warning(f'Unsupported operator {operator!r} for column {path!r}')
    raise UnsupportedOperatorError(
        operator=operator,
        path=path,
        supported=[op.value for op in ConditionOperator],
    )


def validate_value(value: Any, path: str = '') -> None:
    """
    Check the shape of a raw condition value.

    Raises:
        MissingValueError: If the value is MISSING
        IncompleteCustomOperatorError: If a mapping has only one of '_operator' / '_value'
    """
    if value is MISSING:
        raise MissingValueError(path)

    if isinstance(value, Mapping):
        has_operator = has_marker(value, ConditionField.OPERATOR)
        has_value = has_marker(value, ConditionField.VALUE)
        if has_operator != has_value:
            present = ConditionField.OPERATOR if has_operator else ConditionField.VALUE
            raise IncompleteCustomOperatorError(present.value, path)
