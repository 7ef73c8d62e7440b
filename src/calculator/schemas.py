"""Pydantic schemas and value types for the calculator endpoints."""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field


class Operation(str, Enum):
    """Arithmetic operation served by one endpoint.

    The value doubles as the route path segment.
    """

    add = "add"
    sub = "sub"
    mul = "mul"
    div = "div"
    exp = "exp"
    sqrt = "sqrt"
    mod = "mod"

    @property
    def is_unary(self) -> bool:
        """Whether the operation takes a single operand."""
        return self is Operation.sqrt


class ErrorKind(str, Enum):
    """Category of operand validation failure."""

    not_a_number = "not_a_number"
    division_by_zero = "division_by_zero"
    out_of_range = "out_of_range"
    negative_fractional_exponent = "negative_fractional_exponent"
    zero_base_negative_fractional_exponent = "zero_base_negative_fractional_exponent"
    negative_square_root = "negative_square_root"


class ValidationOutcome(NamedTuple):
    """Result of validating an operation against its operands.

    Attributes:
        error: The first rule that matched, or None when the operands are valid.
    """

    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CalculationResponse(BaseModel):
    """Successful calculation body.

    Attributes:
        result: Numeric result; null when the result is not finite.
    """

    result: int | float | None = Field(..., description="Result of the operation")


class ErrorResponse(BaseModel):
    """Body returned for rejected operands."""

    message: str = Field(..., description="Human-readable reason the request was rejected")
