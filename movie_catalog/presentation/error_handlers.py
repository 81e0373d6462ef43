from http import HTTPStatus
from typing import Dict, Type

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from movie_catalog.domain.exceptions import (
    DomainError,
    EditConflictError,
    FormatError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

# Every DomainError subclass must have a row here.
ERROR_STATUSES: Dict[Type[DomainError], HTTPStatus] = {
    NotFoundError: HTTPStatus.NOT_FOUND,
    FormatError: HTTPStatus.BAD_REQUEST,
    ValidationError: HTTPStatus.UNPROCESSABLE_ENTITY,
    EditConflictError: HTTPStatus.CONFLICT,
    PersistenceError: HTTPStatus.INTERNAL_SERVER_ERROR,
}

NOT_FOUND_MESSAGE = "the requested resource could not be found"
EDIT_CONFLICT_MESSAGE = "unable to update the record due to an edit conflict, please try again"
SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"


def error_response(status: HTTPStatus, error, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": error}, headers=headers)


def status_for(exc: DomainError) -> HTTPStatus:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUSES:
            return ERROR_STATUSES[error_type]
    return HTTPStatus.INTERNAL_SERVER_ERROR


def error_detail(exc: DomainError):
    if isinstance(exc, ValidationError):
        return exc.errors
    if isinstance(exc, FormatError):
        return str(exc)
    if isinstance(exc, NotFoundError):
        return NOT_FOUND_MESSAGE
    if isinstance(exc, EditConflictError):
        return EDIT_CONFLICT_MESSAGE
    return SERVER_ERROR_MESSAGE


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status = status_for(exc)
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
    return error_response(status, error_detail(exc))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    status = HTTPStatus(exc.status_code)
    if status == HTTPStatus.NOT_FOUND:
        message = NOT_FOUND_MESSAGE
    elif status == HTTPStatus.METHOD_NOT_ALLOWED:
        message = f"the {request.method} method is not supported for this resource"
    else:
        message = exc.detail
    return error_response(status, message, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    for error_type in ERROR_STATUSES:
        app.add_exception_handler(error_type, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
