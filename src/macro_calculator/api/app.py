"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from macro_calculator.api.macros import ERROR_STATUS_CODES
from macro_calculator.api.macros import router as macros_router
from macro_calculator.app_logging import configure_logging
from macro_calculator.containers import AppContainer
from macro_calculator.domain.errors import MacroCalculationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(macros_router)

    @app.exception_handler(MacroCalculationError)
    async def macro_error_handler(
        request: Request, exc: MacroCalculationError
    ) -> JSONResponse:
        """Render calculation errors with their kind."""
        logger.info("Request %s failed: %s", request.url.path, exc.kind.value)
        return JSONResponse(
            status_code=ERROR_STATUS_CODES[exc.kind],
            content={"detail": {"kind": exc.kind.value, "message": exc.message}},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
