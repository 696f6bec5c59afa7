import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wunderview.config import get_settings
from wunderview.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidArgumentError,
    UnexpectedStatusError,
)
from wunderview.models.common import ErrorResponse
from wunderview.routers.views import router as views_router
from wunderview.routers.wunderlist import router as wunderlist_router

logger = logging.getLogger(__name__)


# --- FastAPI app ---

api = FastAPI(title="Wunderview", version="0.1.0")
api.include_router(views_router)
api.include_router(wunderlist_router)


# --- Exception handlers ---

@api.exception_handler(AuthenticationError)
async def auth_error_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(
        status_code=401, content=ErrorResponse(error_code="auth_error", message=str(exc)).model_dump(),
    )


@api.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(
        status_code=500, content=ErrorResponse(error_code="config_error", message=str(exc)).model_dump(),
    )


@api.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(
        status_code=400, content=ErrorResponse(error_code="invalid_argument", message=str(exc)).model_dump(),
    )


@api.exception_handler(UnexpectedStatusError)
async def unexpected_status_handler(request: Request, exc: UnexpectedStatusError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=502, content=ErrorResponse(error_code="unexpected_status", message=str(exc)).model_dump(),
    )


def run():
    settings = get_settings()
    uvicorn.run(
        "wunderview.main:api",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
