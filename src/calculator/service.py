"""Calculation service: parse, validate, compute and log one operation."""

import math
from typing import Callable, NamedTuple

from src.diagnostics import DiagnosticLogger

from .exceptions import InvalidOperandsError
from .numbers import format_number, parse_operand, render_result
from .schemas import CalculationResponse, ErrorKind, Operation
from .validator import validate


def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` with IEEE results instead of exceptions.

    Overflow gives a signed infinity, a zero base with a negative exponent
    gives infinity, and a negative base with a non-integer exponent gives NaN.
    """
    odd_integer = exponent.is_integer() and int(exponent) % 2 == 1
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and odd_integer else math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if odd_integer else math.inf
        return math.nan


class OperationSpec(NamedTuple):
    """How an operation is computed and described in diagnostics."""

    label: str
    symbol: str
    function: Callable[[float, float], float]


OPERATIONS: dict[Operation, OperationSpec] = {
    Operation.add: OperationSpec("Addition", "+", lambda a, b: a + b),
    Operation.sub: OperationSpec("Subtraction", "-", lambda a, b: a - b),
    Operation.mul: OperationSpec("Multiplication", "*", lambda a, b: a * b),
    Operation.div: OperationSpec("Division", "/", lambda a, b: a / b),
    Operation.exp: OperationSpec("Exponent", "^", power),
    Operation.sqrt: OperationSpec("Square root", "sqrt", lambda a, _: math.sqrt(a)),
    Operation.mod: OperationSpec("Modulo", "%", math.fmod),
}

ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.not_a_number: "num1 and num2 must be numbers",
    ErrorKind.division_by_zero: "Denominator cannot be 0 in division",
    ErrorKind.out_of_range: "Either numbers are too large or too small",
    ErrorKind.negative_fractional_exponent: "If base is negative, exponent cannot be a fraction",
    ErrorKind.zero_base_negative_fractional_exponent: (
        "If base is 0, exponent cannot be a negative fraction"
    ),
    ErrorKind.negative_square_root: "Square root of negative numbers is not supported",
}

# Endpoint-specific wording that replaces the defaults above
MESSAGE_OVERRIDES: dict[tuple[Operation, ErrorKind], str] = {
    (Operation.mod, ErrorKind.division_by_zero): "Denominator cannot be 0 in modulo",
    (Operation.sqrt, ErrorKind.not_a_number): "num1 must be a number",
    (Operation.sqrt, ErrorKind.out_of_range): "Numbers is too large or too small",
}


def error_message(operation: Operation, kind: ErrorKind) -> str:
    """Return the client-facing message for a rejected operation."""
    return MESSAGE_OVERRIDES.get((operation, kind), ERROR_MESSAGES[kind])


def compute(operation: Operation, num1: float, num2: float) -> float:
    """Apply an operation to already validated operands."""
    return OPERATIONS[operation].function(num1, num2)


def describe(operation: Operation, num1: float, num2: float, result: float) -> str:
    """Build the info diagnostic for a successful calculation."""
    spec = OPERATIONS[operation]
    if operation.is_unary:
        return f"{spec.label}: {format_number(num1)} = {format_number(result)}"
    return (
        f"{spec.label}: {format_number(num1)} {spec.symbol} "
        f"{format_number(num2)} = {format_number(result)}"
    )


class Calculator:
    """Request-scoped calculator bound to a diagnostic logger.

    Attributes:
        logger: Sink for operation and error diagnostics.
        legacy_division_check: Reject every division, as the original service did.
    """

    def __init__(self, logger: DiagnosticLogger, legacy_division_check: bool = True) -> None:
        self.logger = logger
        self.legacy_division_check = legacy_division_check

    def calculate(
        self,
        operation: Operation,
        raw_num1: str | None,
        raw_num2: str | None = None,
    ) -> CalculationResponse:
        """Parse, validate and compute one operation.

        Args:
            operation: Operation served by the endpoint.
            raw_num1: ``num1`` query text.
            raw_num2: ``num2`` query text; ignored for unary operations.

        Returns:
            CalculationResponse with the rendered result.

        Raises:
            InvalidOperandsError: If the operands fail validation.
        """
        num1 = parse_operand(raw_num1)
        num2 = 0.0 if operation.is_unary else parse_operand(raw_num2)

        outcome = validate(
            operation,
            num1,
            num2,
            self.logger,
            legacy_division_check=self.legacy_division_check,
        )
        if not outcome.ok:
            raise InvalidOperandsError(
                operation=operation,
                kind=outcome.error,
                message=error_message(operation, outcome.error),
            )

        result = compute(operation, num1, num2)
        self.logger.info(describe(operation, num1, num2, result), operation=operation.value)
        return CalculationResponse(result=render_result(result))
