import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contact_inbox.exceptions import ContactError, RateLimited

logger = logging.getLogger(__name__)


def error_response(exc: ContactError) -> JSONResponse:
    """JSON-ответ для ошибки контактной формы"""
    headers = None
    if isinstance(exc, RateLimited):
        headers = {"Retry-After": str(exc.retry_after)}

    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=headers
    )


async def contact_error_handler(request: Request, exc: ContactError):
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"⚠️ Некорректный запрос {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request"}
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Неподходящий метод на пути API тоже уходит в общий 404
    if exc.status_code in (404, 405):
        logger.warning(f"❌ Не найдено: {request.method} {request.url.path}")
        return PlainTextResponse("404 - Page Not Found", status_code=404)

    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"💥 Ошибка при обработке {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"}
    )


def register_error_handlers(app: FastAPI):
    """Подключение обработчиков ошибок"""
    app.add_exception_handler(ContactError, contact_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
