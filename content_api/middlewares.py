import uuid
from contextvars import ContextVar

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.requests import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import (BaseHTTPMiddleware,
                                       RequestResponseEndpoint)
from starlette.types import ASGIApp

from content_api.models.response import ErrorResponse
from content_api.utils import logger

INTERNAL_SERVER_ERROR = "Internal Server Error"
X_CORRELATION_ID = "X-Correlation-ID"

correlation_id: ContextVar[str] = ContextVar(X_CORRELATION_ID)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        lambda_context = request.scope.get("aws.context")
        correlation_id.set(
            request.headers.get(X_CORRELATION_ID)
            or (lambda_context.aws_request_id if lambda_context else str(uuid.uuid4()))
        )
        logger.set_correlation_id(correlation_id.get())
        response = await call_next(request)
        response.headers[X_CORRELATION_ID] = correlation_id.get()
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Render unexpected errors as ``{"error": ...}`` inside the CORS layer.

    Exception handlers registered for ``Exception`` run in Starlette's
    outermost middleware, where CORS headers are never added.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as error:
            error_id = uuid.uuid4()
            logger.exception(f"Received unhandled error {error_id=}")
            message = str(error) if request.app.debug else INTERNAL_SERVER_ERROR
            return JSONResponse(
                content=jsonable_encoder(ErrorResponse(error=message)),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
