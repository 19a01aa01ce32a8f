"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .config import Settings, get_settings
from .errors import InvalidReceiptError, ReceiptProcessorError
from .storage import ReceiptStore

settings = get_settings()

# Logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


async def handle_receipt_error(request: Request, exc: ReceiptProcessorError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"description": exc.description})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only the receipt body is validated by the framework; undecodable JSON lands here.
    logger.warning(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"description": InvalidReceiptError.description},
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail, "status": exc.status_code},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware re-raises after this returns, so the server logs the traceback
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "status": status.HTTP_500_INTERNAL_SERVER_ERROR},
    )


def create_app(app_settings: Optional[Settings] = None, store: Optional[ReceiptStore] = None) -> FastAPI:
    """Build the API application.

    Args:
        app_settings: configuration, defaults to the environment settings
        store: score record store, a new empty one if not given

    Returns:
        Configured FastAPI application with its own store on ``app.state``
    """
    app_settings = app_settings or settings
    application = FastAPI(title="Receipt Processor API")
    application.state.receipt_store = store if store is not None else ReceiptStore()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=not app_settings.allows_any_origin,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(ReceiptProcessorError, handle_receipt_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(Exception, handle_unexpected_error)

    application.include_router(api_router)

    @application.get("/")
    def root() -> dict[str, str]:
        return {"message": "Receipt Processor API is running"}

    return application


app = create_app()


def main() -> None:
    """Run the API with uvicorn using the configured host and port."""
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
