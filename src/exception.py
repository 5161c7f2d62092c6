# src/exception.py
from fastapi import HTTPException

BadRequestException = lambda detail="Bad request": HTTPException(status_code=400, detail=detail)
ServiceUnavailableException = lambda detail="Service unavailable": HTTPException(
    status_code=503, detail=detail
)


class PaginationError(Exception):
    code = "PAGINATION_ERROR"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPageSize(PaginationError):
    code = "INVALID_PAGE_SIZE"


class InvalidCursor(PaginationError):
    code = "INVALID_CURSOR"


class StoreUnavailable(PaginationError):
    code = "STORE_UNAVAILABLE"
    status_code = 503


def to_http_exception(exc: PaginationError) -> HTTPException:
    if exc.status_code == 503:
        return ServiceUnavailableException(exc.message)
    return BadRequestException(exc.message)
