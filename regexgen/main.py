"""FastAPI application entry point.

Main application setup with middleware, routing, and error handling.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from regexgen.api.regex import router as regex_router
from regexgen.api.schemas import ErrorResponse
from regexgen.core.config import Settings, get_settings
from regexgen.core.factory import ComponentFactory
from regexgen.core.logging_config import setup_logging
from regexgen.interfaces.deriver import (
    EmptyInputError,
    PatternDerivationError,
    TargetNotFoundError,
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

DERIVATION_STATUS_CODES: dict[type[PatternDerivationError], int] = {
    EmptyInputError: status.HTTP_400_BAD_REQUEST,
    TargetNotFoundError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    try:
        settings = settings or get_settings()
        settings.configure_logging()
        setup_logging(settings)

        app = FastAPI(
            title="Regex Extractor Generator",
            description="Derives extraction patterns and JMeter/Groovy artifacts from sample text",
            version=VERSION,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        app.state.settings = settings
        app.state.factory = ComponentFactory(settings)

        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        app.include_router(regex_router)
        logger.info("Registered regex router")

        @app.get("/health", tags=["health"])
        async def health_check():
            """Health check endpoint for load balancers and monitoring."""
            return {
                "status": "healthy",
                "service": "regex-extractor-generator",
                "version": VERSION,
            }

        @app.exception_handler(PatternDerivationError)
        async def derivation_exception_handler(request: Request, exc: PatternDerivationError):
            """Report a rejected derivation with its error code."""
            status_code = DERIVATION_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
            logger.info(f"Derivation rejected ({exc.error_code}): {exc}")
            return JSONResponse(
                status_code=status_code,
                content=ErrorResponse(
                    detail=str(exc),
                    error_code=exc.error_code,
                    extra={"title": exc.title},
                ).model_dump(),
            )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(request: Request, exc: RequestValidationError):
            """Handle Pydantic validation errors."""
            logger.warning(f"Validation error: {exc.errors()}")
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content={
                    "detail": "Validation error",
                    "errors": jsonable_encoder(exc.errors()),
                },
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle uncaught exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(
                    detail="Internal server error",
                    error_code="INTERNAL_ERROR",
                ).model_dump(),
            )

        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI app: {e}", exc_info=True)
        raise


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting uvicorn server on {settings.api_host}:{settings.api_port}...")
    uvicorn.run(
        "regexgen.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
