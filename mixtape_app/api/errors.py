"""Translation of application errors into JSON error payloads.

Every failure leaves the API as {"error": "<message>"} with the status
carried by the exception.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mixtape_app.core import MixtapeAppError, UpstreamError, log_error, log_warning


def json_error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def app_error_handler(request: Request, exc: MixtapeAppError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        log_warning(f"{request.method} {request.url.path}: upstream failure: {exc.message}")
    return json_error(exc.message, exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return json_error(message, 400)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log_error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=True)
    return json_error("Internal server error", 500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MixtapeAppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
