"""Constants for condition building to avoid magic strings."""

from enum import Enum


class ConditionOperator(str, Enum):
    """Operators accepted in a condition set."""

    # Comparison operators
    EQ = '='
    NE = '!='
    NEQ_ISO = '<>'  # ISO standard not-equal operator
    NULL_SAFE_EQ = '<=>'  # MySQL null-safe equality
    LT = '<'
    LE = '<='
    GT = '>'
    GE = '>='

    # String operators
    LIKE = 'LIKE'
    NOT_LIKE = 'NOT LIKE'

    # Special operators
    IN = 'IN'
    NOT_IN = 'NOT IN'
    BETWEEN = 'BETWEEN'
    NOT_BETWEEN = 'NOT BETWEEN'
    IS = 'IS'
    IS_NOT = 'IS NOT'
    IS_NULL = 'IS NULL'
    IS_NOT_NULL = 'IS NOT NULL'


class ConditionField(str, Enum):
    """Marker keys of a custom-operator object."""

    OPERATOR = '_operator'
    VALUE = '_value'


class _Missing:
    """Marker for an absent value."""

    _instance = None

    def __new__(cls) -> '_Missing':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

PLACEHOLDER = '?'
CONJUNCTION = ' AND '

# Operator groups for easier checking
SUPPORTED_OPERATORS = frozenset(ConditionOperator)
COMPARISON_OPERATORS = frozenset({
    ConditionOperator.EQ,
    ConditionOperator.NE,
    ConditionOperator.NEQ_ISO,
    ConditionOperator.NULL_SAFE_EQ,
    ConditionOperator.LT,
    ConditionOperator.LE,
    ConditionOperator.GT,
    ConditionOperator.GE,
    ConditionOperator.LIKE,
    ConditionOperator.NOT_LIKE,
})
MEMBERSHIP_OPERATORS = frozenset({ConditionOperator.IN, ConditionOperator.NOT_IN})
RANGE_OPERATORS = frozenset({ConditionOperator.BETWEEN, ConditionOperator.NOT_BETWEEN})
NULL_CHECK_OPERATORS = frozenset({ConditionOperator.IS_NULL, ConditionOperator.IS_NOT_NULL})
TRUTH_CHECK_OPERATORS = frozenset({ConditionOperator.IS, ConditionOperator.IS_NOT})
