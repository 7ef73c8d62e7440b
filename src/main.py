import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from .config import get_settings
from .diagnostics import configure_logging, get_diagnostic_logger
from .calculator import router as calculator_router
from .calculator.exceptions import CalculatorError

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: route diagnostics to console and log files
    configure_logging(settings)
    get_diagnostic_logger().info(
        f"Calculator microservice running on http://localhost:{settings.PORT}"
    )

    yield

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# Rejected operands are client errors
@app.exception_handler(CalculatorError)
async def calculator_exception_handler(request: Request, exc: CalculatorError):
    return JSONResponse(
        status_code=400,
        content={"message": exc.message}
    )

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}

# Include routers
app.include_router(calculator_router)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
