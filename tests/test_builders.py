"""Tests for the concrete condition builders."""

from decimal import Decimal

import pytest

from namerec.condsql import ConditionInvariantError
from namerec.condsql import ConditionOperator
from namerec.condsql import EmptyValueListError
from namerec.condsql import InvalidElementTypeError
from namerec.condsql import TypeMismatchError
from namerec.condsql import WrongArityError
from namerec.condsql.builders import build_basic_comparison
from namerec.condsql.builders import build_membership
from namerec.condsql.builders import build_null_check
from namerec.condsql.builders import build_range
from namerec.condsql.builders import build_truth_check
from namerec.condsql.constants import COMPARISON_OPERATORS


class TestBasicComparison:
    """Tests for build_basic_comparison."""

    @pytest.mark.parametrize('operator', sorted(COMPARISON_OPERATORS, key=lambda op: op.value))
    def test_every_comparison_operator(self, operator: ConditionOperator) -> None:
        """Each comparison operator yields one placeholder and one value."""
        clauses, values = build_basic_comparison('total', operator, 5)

        assert clauses == [f'total {operator.value} ?']
        assert values == [5]

    @pytest.mark.parametrize('value', [[1], (1, 2), {'a': 1}, {1, 2}, frozenset({1})])
    def test_container_operand_rejected(self, value: object) -> None:
        """Containers are not bound as a single scalar."""
        with pytest.raises(TypeMismatchError) as exc_info:
            build_basic_comparison('total', ConditionOperator.GT, value, path='total')

        assert exc_info.value.actual == type(value).__name__
        assert exc_info.value.path == 'total'

    def test_foreign_operator_is_invariant_violation(self) -> None:
        """An operator of another family never reaches this builder."""
        with pytest.raises(ConditionInvariantError):
            build_basic_comparison('total', ConditionOperator.IN, 5)


class TestMembership:
    """Tests for build_membership."""

    def test_in_one_placeholder_per_element(self) -> None:
        """IN gets as many placeholders as values."""
        clauses, values = build_membership('id', ConditionOperator.IN, [1, 2, 3])

        assert clauses == ['id IN (?, ?, ?)']
        assert values == [1, 2, 3]

    def test_not_in(self) -> None:
        """NOT IN keeps the operator text."""
        clauses, values = build_membership('status', ConditionOperator.NOT_IN, ('new',))

        assert clauses == ['status NOT IN (?)']
        assert values == ['new']

    def test_values_are_a_copy(self) -> None:
        """The returned values list is not the caller's list."""
        items = [1, 2]
        _, values = build_membership('id', ConditionOperator.IN, items)
        values.append(3)

        assert items == [1, 2]

    def test_mixed_strings_and_numbers(self) -> None:
        """Strings, ints, floats and decimals may be mixed."""
        _, values = build_membership('code', ConditionOperator.IN, ['a', 1, 2.5, Decimal('3.10')])

        assert values == ['a', 1, 2.5, Decimal('3.10')]

    @pytest.mark.parametrize('value', ['abc', 5, None, {'a': 1}])
    def test_non_list_rejected(self, value: object) -> None:
        """A non-list operand is a type mismatch."""
        with pytest.raises(TypeMismatchError) as exc_info:
            build_membership('id', ConditionOperator.IN, value)

        assert exc_info.value.expected == 'a list of values'

    def test_empty_list_rejected(self) -> None:
        """IN with nothing to match is refused."""
        with pytest.raises(EmptyValueListError) as exc_info:
            build_membership('id', ConditionOperator.NOT_IN, [], path='id')

        assert exc_info.value.operator == 'NOT IN'

    @pytest.mark.parametrize(
        ('value', 'index', 'type_name'),
        [
            ([1, None], 1, 'NoneType'),
            (['a', 'b', True], 2, 'bool'),
            ([[1]], 0, 'list'),
            ([1, 2, {'x': 1}], 2, 'dict'),
        ],
        ids=['none', 'bool', 'nested_list', 'dict'],
    )
    def test_invalid_element_rejected(self, value: list, index: int, type_name: str) -> None:
        """Only strings and numbers are allowed; the error names the position."""
        with pytest.raises(InvalidElementTypeError) as exc_info:
            build_membership('id', ConditionOperator.IN, value)

        assert exc_info.value.index == index
        assert exc_info.value.type_name == type_name


class TestRange:
    """Tests for build_range."""

    def test_between(self) -> None:
        """BETWEEN binds low then high."""
        clauses, values = build_range('total', ConditionOperator.BETWEEN, [10, 20])

        assert clauses == ['total BETWEEN ? AND ?']
        assert values == [10, 20]

    def test_not_between_with_tuple(self) -> None:
        """Tuples are accepted as ranges."""
        clauses, values = build_range('total', ConditionOperator.NOT_BETWEEN, ('a', 'z'))

        assert clauses == ['total NOT BETWEEN ? AND ?']
        assert values == ['a', 'z']

    @pytest.mark.parametrize('value', [[], [1], [1, 2, 3]])
    def test_wrong_arity_rejected(self, value: list) -> None:
        """Exactly two bounds are required."""
        with pytest.raises(WrongArityError) as exc_info:
            build_range('total', ConditionOperator.BETWEEN, value)

        assert exc_info.value.expected == 2
        assert exc_info.value.actual == len(value)

    def test_non_list_rejected(self) -> None:
        """A scalar is not a range."""
        with pytest.raises(TypeMismatchError):
            build_range('total', ConditionOperator.BETWEEN, 5)


class TestSpecial:
    """Tests for null and truth checks."""

    @pytest.mark.parametrize('operator', [ConditionOperator.IS_NULL, ConditionOperator.IS_NOT_NULL])
    def test_null_check_has_no_values(self, operator: ConditionOperator) -> None:
        """Null checks carry no placeholder and ignore the operand."""
        clauses, values = build_null_check('note', operator, 'ignored')

        assert clauses == [f'note {operator.value}']
        assert values == []

    @pytest.mark.parametrize(('value', 'expected'), [(True, 'TRUE'), (False, 'FALSE')])
    def test_truth_check(self, value: bool, expected: str) -> None:
        """Booleans are bound as TRUE / FALSE literals."""
        clauses, values = build_truth_check('active', ConditionOperator.IS_NOT, value)

        assert clauses == ['active IS NOT ?']
        assert values == [expected]

    @pytest.mark.parametrize('value', [1, 0, 'true', None])
    def test_truth_check_requires_bool(self, value: object) -> None:
        """Truthy non-bools are not coerced."""
        with pytest.raises(TypeMismatchError) as exc_info:
            build_truth_check('active', ConditionOperator.IS, value)

        assert exc_info.value.expected == 'a boolean'
