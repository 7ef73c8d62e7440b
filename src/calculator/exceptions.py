"""Custom exceptions for the calculator service."""

from .schemas import ErrorKind, Operation


class CalculatorError(Exception):
    """Base exception for all calculator service errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidOperandsError(CalculatorError):
    """Raised when operands fail validation for an operation.

    Attributes:
        operation: The operation that was requested.
        kind: The validation rule that rejected the operands.
    """

    def __init__(self, operation: Operation, kind: ErrorKind, message: str):
        super().__init__(message=message)
        self.operation = operation
        self.kind = kind
