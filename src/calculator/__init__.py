"""Calculator module - Arithmetic endpoints and operand validation."""

from .schemas import (
    Operation,
    ErrorKind,
    ValidationOutcome,
    CalculationResponse,
    ErrorResponse,
)
from .exceptions import CalculatorError, InvalidOperandsError
from .validator import validate
from .service import Calculator, compute, error_message
from .router import router


__all__ = [
    # Schemas
    "Operation",
    "ErrorKind",
    "ValidationOutcome",
    "CalculationResponse",
    "ErrorResponse",
    # Exceptions
    "CalculatorError",
    "InvalidOperandsError",
    # Validation and service
    "validate",
    "Calculator",
    "compute",
    "error_message",
    # Router
    "router",
]
