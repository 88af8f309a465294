"""Protocol definition for condition builders."""

from typing import Any
from typing import Protocol

from namerec.condsql.constants import ConditionOperator
from namerec.condsql.types import BuildResult


class ConditionBuilder(Protocol):
    """
    Protocol for condition builders.

    A builder receives an already rendered column identifier, a validated
    operator and the raw operand, and returns one fragment plus the values
    bound to its placeholders.

    The path argument is the unquoted column name used in error messages.
    """

    def __call__(
        self,
        column: str,
        operator: ConditionOperator,
        value: Any,
        path: str = '',
    ) -> BuildResult:
        """
        Build a single condition.

        Args:
            column: Rendered column identifier
            operator: Validated operator
            value: Raw operand
            path: Unquoted column name for error reporting

        Returns:
            Tuple of (fragments, values)
        """
        ...
