"""Type definitions for condition building."""

from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from namerec.condsql.constants import CONJUNCTION

# Type aliases for condition structure
ConditionSet = Mapping[str, Any]
Fragment = str
ParameterList = list[Any]
BuildResult = tuple[list[Fragment], ParameterList]
IdentifierQuoter = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class NullCheck:
    """`None` value: the column must be NULL."""


@dataclass(frozen=True, slots=True)
class ValueList:
    """List value: set membership."""

    items: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class CustomOperator:
    """Object carrying an explicit '_operator' and its '_value' operand."""

    operator: Any
    value: Any


@dataclass(frozen=True, slots=True)
class NestedConditions:
    """Mapping without operator markers: conditions on prefixed columns."""

    conditions: ConditionSet


@dataclass(frozen=True, slots=True)
class Scalar:
    """Any other value: default equality."""

    value: Any


ConditionValue = NullCheck | ValueList | CustomOperator | NestedConditions | Scalar


@dataclass(frozen=True, slots=True)
class WhereClause:
    """Snapshot of accumulated WHERE fragments and their bound values."""

    clauses: tuple[Fragment, ...] = ()
    values: tuple[Any, ...] = ()

    @property
    def sql(self) -> str:
        """Fragments joined into a single conjunctive condition."""
        return CONJUNCTION.join(self.clauses)

    def __bool__(self) -> bool:
        return bool(self.clauses)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary with 'clauses' and 'values' keys
        """
        return {
            'clauses': list(self.clauses),
            'values': list(self.values),
        }
