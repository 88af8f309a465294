"""Condition building exceptions."""

__all__ = [
    'ConditionError',
    'ConditionInvariantError',
    'EmptyValueListError',
    'IncompleteCustomOperatorError',
    'InvalidElementTypeError',
    'MissingValueError',
    'TypeMismatchError',
    'UnsupportedOperatorError',
    'WrongArityError',
]


class ConditionError(ValueError):
    """Raised when a condition set cannot be translated into WHERE fragments."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """
        Initialize ConditionError.

        Args:
            message: Error message
            path: Column the error refers to (e.g., 'orders.status')
        """
        self.path = path
        if path:
            super().__init__(f'{message} (at {path})')
        else:
            super().__init__(message)


class UnsupportedOperatorError(ConditionError):
    """Raised when an operator is not in the whitelist."""

    def __init__(self, operator: object, path: str = '', supported: list[str] | None = None):
        """
        Initialize UnsupportedOperatorError.

        Args:
            operator: The rejected operator
            path: Column the operator was applied to
            supported: List of supported operators
        """
        self.operator = operator
        self.supported = supported or []

        message = f'The operator "{operator}" is not supported in this context'
        if self.supported:
            message += f". Supported: {', '.join(self.supported)}"

        super().__init__(message, path)


class MissingValueError(ConditionError):
    """Raised when a condition value is absent."""

    def __init__(self, path: str = ''):
        super().__init__('The value in the WHERE condition cannot be missing', path)


class IncompleteCustomOperatorError(ConditionError):
    """Raised when only one of '_operator' and '_value' is given."""

    def __init__(self, present: str, path: str = ''):
        """
        Initialize IncompleteCustomOperatorError.

        Args:
            present: The marker key that was provided
            path: Column the custom operator object belongs to
        """
        self.present = present
        message = (
            "When using a custom operator in a WHERE condition object, you must provide "
            f"both '_value' and '_operator' properties (only '{present}' given)"
        )
        super().__init__(message, path)


class TypeMismatchError(ConditionError):
    """Raised when a value has the wrong shape for the selected operator."""

    def __init__(self, expected: str, actual: str, context: str, path: str = ''):
        """
        Initialize TypeMismatchError.

        Args:
            expected: Description of the expected type
            actual: Name of the type that was provided
            context: What required the type (usually the operator family)
            path: Column the value belongs to
        """
        self.expected = expected
        self.actual = actual
        self.context = context
        super().__init__(f'{context} expects {expected}, but a {actual} was provided', path)


class EmptyValueListError(ConditionError):
    """Raised when IN / NOT IN gets an empty list."""

    def __init__(self, operator: str, path: str = ''):
        self.operator = operator
        message = f'The {operator} operator requires at least one value, but an empty list was given'
        super().__init__(message, path)


class InvalidElementTypeError(ConditionError):
    """Raised when an IN / NOT IN list holds something other than strings or numbers."""

    def __init__(self, index: int, type_name: str, path: str = ''):
        """
        Initialize InvalidElementTypeError.

        Args:
            index: Position of the offending element
            type_name: Type name of the offending element
            path: Column the list belongs to
        """
        self.index = index
        self.type_name = type_name
        message = (
            f'Invalid value type at index {index} in the list used with the IN or NOT IN operator. '
            f'Only strings or numbers are allowed, but a value of type {type_name} was found'
        )
        super().__init__(message, path)


class WrongArityError(ConditionError):
    """Raised when BETWEEN / NOT BETWEEN does not get exactly two values."""

    def __init__(self, actual: int, expected: int = 2, path: str = ''):
        self.expected = expected
        self.actual = actual
        message = (
            f'The BETWEEN and NOT BETWEEN operators require exactly {expected} values to define a range, '
            f'but the provided list has {actual} values'
        )
        super().__init__(message, path)


class ConditionInvariantError(RuntimeError):
    """Raised when a validated operator has no registered builder."""
