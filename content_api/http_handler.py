import uuid

import uvicorn
from aws_lambda_powertools.logging.logger import set_package_logger
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from starlette.exceptions import HTTPException

from content_api import settings as default_settings
from content_api.api.api import router as api_router
from content_api.deps import build_post_repository
from content_api.exceptions import MissingFieldsException
from content_api.middlewares import (X_CORRELATION_ID, CorrelationIdMiddleware,
                                     UnhandledErrorMiddleware)
from content_api.models.response import ErrorResponse
from content_api.repositories.post_repository import PostRepository
from content_api.settings import Settings
from content_api.utils import logger, metrics


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        content=jsonable_encoder(ErrorResponse(error=message)),
        status_code=status_code,
    )


async def http_exception_handler(
    request: Request, error: HTTPException
) -> JSONResponse:
    error_id = uuid.uuid4()
    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Received http exception {error_id=} {error.detail=}")
    else:
        logger.warning(
            f"Received http exception {error_id=} {error.status_code=} {error.detail=}"
        )
    return _error_response(error.status_code, str(error.detail))


async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    error_id = uuid.uuid4()
    logger.warning(f"Received request validation error {error_id=} {error.errors()=}")
    return _error_response(
        status.HTTP_400_BAD_REQUEST, MissingFieldsException.MESSAGE
    )


def create_app(
    settings: Settings | None = None, repository: PostRepository | None = None
) -> FastAPI:
    settings = settings or default_settings
    if settings.debug:
        set_package_logger()

    app = FastAPI(debug=settings.debug, title="ContentApi", version="1.0.0")
    app.state.post_repository = repository or build_post_repository(settings)
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(GZipMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[X_CORRELATION_ID, "Location"],
    )
    app.include_router(api_router)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_error_handler
    )
    return app


app = create_app()

handler = Mangum(app)
handler.__name__ = "handler"
handler = logger.inject_lambda_context(handler, clear_state=True, log_event=True)
handler = metrics.log_metrics(handler, capture_cold_start_metric=True)


if __name__ == "__main__":
    uvicorn.run("content_api.http_handler:app", host="localhost", port=8080, reload=True)
