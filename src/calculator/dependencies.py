"""FastAPI dependencies for the calculator endpoints."""

from typing import Annotated

from fastapi import Depends

from src.config import Settings, get_settings
from src.diagnostics import DiagnosticLogger, get_diagnostic_logger

from .service import Calculator


async def get_calculator(
    logger: Annotated[DiagnosticLogger, Depends(get_diagnostic_logger)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Calculator:
    """Build a calculator for the current request.

    Args:
        logger: Injected diagnostic logger.
        settings: Application settings.

    Returns:
        Calculator bound to the logger and the configured division rule.
    """
    return Calculator(logger=logger, legacy_division_check=settings.LEGACY_DIVISION_CHECK)
