import functools

from fastapi import HTTPException

from content_api.exceptions import PostOperationFailedException
from content_api.utils import logger


def error_message(message: str):
    """Replace any non-HTTP failure of a route with a 500 carrying ``message``."""

    def decorator_wrapper(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                logger.exception(f"Route {func.__name__} failed")
                raise PostOperationFailedException(message) from exc

        return wrapper

    return decorator_wrapper
