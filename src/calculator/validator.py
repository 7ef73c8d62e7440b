"""Operand validation shared by every calculator endpoint."""

import math

from src.diagnostics import DiagnosticLogger

from .numbers import format_number, has_fraction, is_safe_magnitude
from .schemas import ErrorKind, Operation, ValidationOutcome

OK = ValidationOutcome()

DIAGNOSTICS: dict[ErrorKind, str] = {
    ErrorKind.not_a_number: "Invalid input: Input parameters are not numbers",
    ErrorKind.division_by_zero: "Zero division: Division by 0 is not possible",
    ErrorKind.out_of_range: "Range exceeded: Input parameters have exceeded min/max range limits",
    ErrorKind.negative_fractional_exponent: (
        "Negative exponential error: Base is negative and exponent is a fraction"
    ),
    ErrorKind.zero_base_negative_fractional_exponent: (
        "Zero exponential error: Base is 0 and exponent is a negative fraction"
    ),
    ErrorKind.negative_square_root: "Negative square root: Input number is negative",
}


def _reject(operation: Operation, kind: ErrorKind, logger: DiagnosticLogger) -> ValidationOutcome:
    logger.error(DIAGNOSTICS[kind], operation=operation.value, error_kind=kind.value)
    return ValidationOutcome(error=kind)


def _is_zero_division(operation: Operation, num2: float, legacy: bool) -> bool:
    if legacy:
        # Every division is rejected; only modulo looks at the denominator.
        return operation is Operation.div or (operation is Operation.mod and num2 == 0)
    return operation in (Operation.div, Operation.mod) and num2 == 0


def validate(
    operation: Operation,
    num1: float,
    num2: float,
    logger: DiagnosticLogger,
    *,
    legacy_division_check: bool = True,
) -> ValidationOutcome:
    """Classify operands for an operation.

    Rules are checked in a fixed order and the first match wins:
    not-a-number, division by zero, out of safe range, negative base with a
    fractional exponent, zero base with a negative fractional exponent,
    negative square root.

    The exponent rules look at the rendered text of the exponent rather than
    its value, so ``1e-7`` is not treated as a fraction while ``1.5e-7`` is.

    Args:
        operation: Requested operation.
        num1: First operand (the base for ``exp``).
        num2: Second operand; ``0.0`` for unary operations.
        logger: Diagnostic sink receiving one error record per rejection.
        legacy_division_check: Keep the original grouping that rejects every
            division regardless of the denominator.

    Returns:
        ``ValidationOutcome`` with ``error`` set to the first matching rule,
        or an ok outcome.
    """
    if math.isnan(num1) or math.isnan(num2):
        return _reject(operation, ErrorKind.not_a_number, logger)

    if _is_zero_division(operation, num2, legacy_division_check):
        return _reject(operation, ErrorKind.division_by_zero, logger)

    if not (is_safe_magnitude(num1) and is_safe_magnitude(num2)):
        return _reject(operation, ErrorKind.out_of_range, logger)

    if operation is Operation.exp:
        fractional = has_fraction(num2)
        if num1 < 0 and fractional:
            return _reject(operation, ErrorKind.negative_fractional_exponent, logger)
        if num1 == 0 and float(format_number(num2)) < 0 and fractional:
            return _reject(operation, ErrorKind.zero_base_negative_fractional_exponent, logger)
        return OK

    if operation is Operation.sqrt:
        if num1 < 0:
            return _reject(operation, ErrorKind.negative_square_root, logger)
        return OK

    return OK
