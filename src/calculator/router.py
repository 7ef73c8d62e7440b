"""FastAPI router for the arithmetic endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from .dependencies import get_calculator
from .schemas import CalculationResponse, ErrorResponse, Operation
from .service import Calculator

router = APIRouter(
    tags=["calculator"],
    responses={400: {"model": ErrorResponse, "description": "Operands rejected"}},
)

CalculatorDep = Annotated[Calculator, Depends(get_calculator)]
# Plain strings so bad input reaches validation instead of a 422.
# Lists so a repeated parameter resolves to its first value.
Num1 = Annotated[list[str] | None, Query(description="First operand")]
Num2 = Annotated[list[str] | None, Query(description="Second operand")]


def first(values: list[str] | None) -> str | None:
    """Return the first occurrence of a query parameter, or None when absent."""
    return values[0] if values else None


@router.get("/add", response_model=CalculationResponse)
async def add(calculator: CalculatorDep, num1: Num1 = None, num2: Num2 = None) -> CalculationResponse:
    """Add two numbers: /add?num1=x&num2=y"""
    return calculator.calculate(Operation.add, first(num1), first(num2))


@router.get("/sub", response_model=CalculationResponse)
async def subtract(calculator: CalculatorDep, num1: Num1 = None, num2: Num2 = None) -> CalculationResponse:
    """Subtract num2 from num1: /sub?num1=x&num2=y"""
    return calculator.calculate(Operation.sub, first(num1), first(num2))


@router.get("/mul", response_model=CalculationResponse)
async def multiply(calculator: CalculatorDep, num1: Num1 = None, num2: Num2 = None) -> CalculationResponse:
    """Multiply two numbers: /mul?num1=x&num2=y"""
    return calculator.calculate(Operation.mul, first(num1), first(num2))


@router.get("/div", response_model=CalculationResponse)
async def divide(calculator: CalculatorDep, num1: Num1 = None, num2: Num2 = None) -> CalculationResponse:
    """Divide num1 by num2: /div?num1=x&num2=y"""
    return calculator.calculate(Operation.div, first(num1), first(num2))


@router.get("/exp", response_model=CalculationResponse)
async def exponent(
    calculator: CalculatorDep,
    num1: Annotated[list[str] | None, Query(description="Base")] = None,
    num2: Annotated[list[str] | None, Query(description="Exponent")] = None,
) -> CalculationResponse:
    """Raise num1 to the power of num2: /exp?num1=x&num2=y"""
    return calculator.calculate(Operation.exp, first(num1), first(num2))


@router.get("/sqrt", response_model=CalculationResponse)
async def square_root(calculator: CalculatorDep, num1: Num1 = None) -> CalculationResponse:
    """Square root of num1: /sqrt?num1=x"""
    return calculator.calculate(Operation.sqrt, first(num1))


@router.get("/mod", response_model=CalculationResponse)
async def modulo(calculator: CalculatorDep, num1: Num1 = None, num2: Num2 = None) -> CalculationResponse:
    """Remainder of num1 divided by num2: /mod?num1=x&num2=y"""
    return calculator.calculate(Operation.mod, first(num1), first(num2))
