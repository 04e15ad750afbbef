from typing import Any

from fastapi import HTTPException, status


class StoreUnavailableError(Exception):
    """Raised by a repository when the backing document store fails."""


class MissingFieldsException(HTTPException):
    MESSAGE = "Missing fields. Required: title, content, author"

    def __init__(self, missing: list[str] | None = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=self.MESSAGE)
        self.missing = missing or []


class MissingIdException(HTTPException):
    def __init__(self, detail: Any = "Missing ?id=POST_ID") -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)


class PostNotFoundException(HTTPException):
    def __init__(self, detail: Any = "Post not found.") -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)


class PostOperationFailedException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
