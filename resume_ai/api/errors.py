"""Maps the domain exception taxonomy to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_ai.analysis.exceptions import ProviderError
from resume_ai.extraction.exceptions import TextExtractionError
from resume_ai.logging.logger import Log
from resume_ai.uploads.exceptions import (
    ContentMismatchError,
    EmptyUploadError,
    MissingFileError,
    MultipleFilesError,
    UnsupportedMediaTypeError,
    UploadError,
    UploadTooLargeError,
)

SERVER_ERROR_MESSAGE = "Something went wrong on the server."

UPLOAD_ERROR_STATUS: dict[type[UploadError], int] = {
    MissingFileError: 400,
    MultipleFilesError: 400,
    EmptyUploadError: 400,
    ContentMismatchError: 400,
    UploadTooLargeError: 413,
    UnsupportedMediaTypeError: 415,
}


def error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def handle_upload_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = UPLOAD_ERROR_STATUS.get(type(exc), 400)
    Log.warning(f"Rejected upload on {request.url.path}: {exc}")
    return error_response(status_code, str(exc))


async def handle_extraction_error(request: Request, exc: Exception) -> JSONResponse:
    Log.warning(f"Text extraction failed on {request.url.path}: {exc}")
    return error_response(422, str(exc))


async def handle_provider_error(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"AI provider failure on {request.url.path}: {type(exc).__name__}: {exc}")
    return error_response(500, SERVER_ERROR_MESSAGE)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Raised by the framework, e.g. an unparseable multipart body or an unknown route
    Log.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"SERVER ERROR on {request.url.path}: {exc}")
    return error_response(500, SERVER_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, handle_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(UploadError, handle_upload_error)
    app.add_exception_handler(TextExtractionError, handle_extraction_error)
    app.add_exception_handler(ProviderError, handle_provider_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
