"""
Цепочка обработки запроса.

Порядок (снаружи внутрь): логирование запроса -> лимит отправок -> роутинг.
Любое звено может сразу вернуть ответ, не передавая запрос дальше.
"""
import logging

from fastapi import FastAPI, Request

from contact_inbox.api.errors import error_response
from contact_inbox.exceptions import RateLimited

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/messages"


def get_client_address(request: Request) -> str:
    """Адрес клиента для лимита отправок"""
    if request.app.state.settings.TRUST_FORWARDED_FOR:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

    if request.client is None:
        return "unknown"
    return request.client.host


async def log_requests(request: Request, call_next):
    logger.info(f"🌍 Запрос: {request.method} {request.url.path}")
    return await call_next(request)


async def rate_limit_submissions(request: Request, call_next):
    if request.method != "POST" or request.url.path != SUBMIT_PATH:
        return await call_next(request)

    client = get_client_address(request)
    retry_after = request.app.state.rate_limiter.hit(client)

    if retry_after:
        logger.warning(f"🚫 Превышен лимит отправок: {client} (повтор через {retry_after} с)")
        return error_response(RateLimited(retry_after))

    return await call_next(request)


def register_middleware(app: FastAPI):
    # Последний добавленный middleware выполняется первым
    app.middleware("http")(rate_limit_submissions)
    app.middleware("http")(log_requests)
