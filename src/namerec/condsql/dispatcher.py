"""Classify raw condition values and dispatch them to condition builders."""

import logging
from collections.abc import Mapping
from typing import Any

from namerec.condsql.builders import ConditionBuilder
from namerec.condsql.builders import build_basic_comparison
from namerec.condsql.builders import build_membership
from namerec.condsql.builders import build_null_check
from namerec.condsql.builders import build_range
from namerec.condsql.builders import build_truth_check
from namerec.condsql.constants import COMPARISON_OPERATORS
from namerec.condsql.constants import MEMBERSHIP_OPERATORS
from namerec.condsql.constants import NULL_CHECK_OPERATORS
from namerec.condsql.constants import RANGE_OPERATORS
from namerec.condsql.constants import TRUTH_CHECK_OPERATORS
from namerec.condsql.constants import ConditionField
from namerec.condsql.constants import MISSING
from namerec.condsql.constants import ConditionOperator
from namerec.condsql.dialects import plain_identifier
from namerec.condsql.exceptions import ConditionInvariantError
from namerec.condsql.types import BuildResult
from namerec.condsql.types import ConditionValue
from namerec.condsql.types import CustomOperator
from namerec.condsql.types import IdentifierQuoter
from namerec.condsql.types import NestedConditions
from namerec.condsql.types import NullCheck
from namerec.condsql.types import Scalar
from namerec.condsql.types import ValueList
from namerec.condsql.validators import has_marker
from namerec.condsql.validators import validate_operator
from namerec.condsql.validators import validate_value

logger = logging.getLogger(__name__)

# Operator handler registry, filled by _init_operator_builders()
_OPERATOR_BUILDERS: dict[ConditionOperator, ConditionBuilder] = {}


def _init_operator_builders() -> None:
    """Initialize operator -> builder registry."""
    families: list[tuple[frozenset[ConditionOperator], ConditionBuilder]] = [
        (COMPARISON_OPERATORS, build_basic_comparison),
        (MEMBERSHIP_OPERATORS, build_membership),
        (RANGE_OPERATORS, build_range),
        (NULL_CHECK_OPERATORS, build_null_check),
        (TRUTH_CHECK_OPERATORS, build_truth_check),
    ]
    for operators, builder in families:
        for operator in operators:
            _OPERATOR_BUILDERS[operator] = builder


_init_operator_builders()


def classify(value: Any) -> ConditionValue:
    """
    Convert a raw condition value into its tagged form.

    A custom operator object without '_value' gets MISSING as its operand.

    Examples:
        >>> classify(None)
        NullCheck()
        >>> classify([1, 2])
        ValueList(items=(1, 2))
        >>> classify({'_operator': '>', '_value': 3})
        CustomOperator(operator='>', value=3)
    """
    if value is None:
        return NullCheck()
    if isinstance(value, (list, tuple)):
        return ValueList(tuple(value))
    if isinstance(value, Mapping):
        if has_marker(value, ConditionField.OPERATOR):
            return CustomOperator(
                value[ConditionField.OPERATOR.value],
                value.get(ConditionField.VALUE.value, MISSING),
            )
        return NestedConditions(value)
    return Scalar(value)


def build_condition(
    column: str,
    operator: Any,
    value: Any,
    quoter: IdentifierQuoter | None = None,
) -> BuildResult:
    """
    Validate an operator and build the condition with the matching builder.

    Args:
        column: Effective (dotted) column name
        operator: Operator to apply
        value: Raw operand
        quoter: Identifier renderer (defaults to plain names)

    Returns:
        Tuple of (fragments, values)

    Raises:
        UnsupportedOperatorError: If the operator is not whitelisted
        ConditionInvariantError: If a whitelisted operator has no builder
    """
    checked = validate_operator(operator, path=column)

    builder = _OPERATOR_BUILDERS.get(checked)
    if builder is None:
        raise ConditionInvariantError(f'No condition builder registered for operator {checked.value}')

    render = quoter or plain_identifier
    return builder(render(column), checked, value, path=column)


def classify_and_build(
    column: str,
    value: Any,
    quoter: IdentifierQuoter | None = None,
) -> BuildResult:
    """
    Build WHERE fragments for one column based on the shape of its value.

    None checks for NULL, a list checks membership, a custom operator object
    uses its own operator, a plain mapping holds conditions on prefixed columns
    and anything else is compared for equality.

    Args:
        column: Effective (dotted) column name
        value: Raw condition value
        quoter: Identifier renderer (defaults to plain names)

    Returns:
        Tuple of (fragments, values)

    Raises:
        ConditionError: If the value or its operator is invalid
    """
    validate_value(value, path=column)

    match classify(value):
        case NullCheck():
            return build_condition(column, ConditionOperator.IS_NULL, None, quoter)
        case ValueList(items=items):
            return build_condition(column, ConditionOperator.IN, list(items), quoter)
        case CustomOperator(operator=operator, value=operand):
            logger.debug(f'Custom operator {operator!r} for column {column!r}')
            return build_condition(column, operator, operand, quoter)
        case NestedConditions(conditions=conditions):
            # Import here to avoid circular dependency
            from namerec.condsql.aggregator import build_all
            return build_all(conditions, prefix=column, quoter=quoter)
        case Scalar(value=scalar):
            return build_condition(column, ConditionOperator.EQ, scalar, quoter)
        case _:
            raise ConditionInvariantError(f'Unclassified condition value for column {column!r}')
