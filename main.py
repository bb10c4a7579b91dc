import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_inbox.api.errors import register_error_handlers
from contact_inbox.api.middleware import register_middleware
from contact_inbox.api.routes import archive, health, messages
from contact_inbox.api.static import PublicFiles
from contact_inbox.config import Settings, settings as default_settings
from contact_inbox.database import InMemoryMessageStore, MessageStore
from contact_inbox.guard import SlidingWindowRateLimiter, SubmissionChecker

logger = logging.getLogger("contact_inbox")


def configure_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle события - выполняется при старте и остановке"""
    settings = app.state.settings

    logger.info(f"✅ {settings.APP_NAME} запущен: http://localhost:{settings.PORT}")
    logger.info(
        f"🛡️ Лимит отправок: {settings.RATE_LIMIT_MAX_SUBMISSIONS} "
        f"за {settings.RATE_LIMIT_WINDOW_SECONDS:g} с"
    )

    yield

    logger.info("👋 Остановка приложения...")


def create_app(
        settings: Settings = None,
        store: MessageStore = None,
        rate_limiter: SlidingWindowRateLimiter = None
) -> FastAPI:
    """Сборка приложения: хранилище, проверки, middleware, роутеры, статика"""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.store = store or InMemoryMessageStore()
    app.state.checker = SubmissionChecker(
        min_length=settings.MESSAGE_MIN_LENGTH,
        max_length=settings.MESSAGE_MAX_LENGTH
    )
    if rate_limiter is None:
        rate_limiter = SlidingWindowRateLimiter(
            max_attempts=settings.RATE_LIMIT_MAX_SUBMISSIONS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS
        )
    app.state.rate_limiter = rate_limiter

    register_error_handlers(app)
    register_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Подключаем роутеры
    app.include_router(
        messages.router,
        prefix="/messages",
        tags=["messages"]
    )
    app.include_router(archive.router, tags=["archive"])
    app.include_router(health.router, tags=["health"])

    # Статика подключается последней: всё, что не совпало с API, идёт сюда
    if os.path.isdir(settings.PUBLIC_DIR):
        app.mount("/", PublicFiles(directory=settings.PUBLIC_DIR, html=True), name="public")
    else:
        logger.warning(f"⚠️ Папка статики не найдена: {settings.PUBLIC_DIR}")

    return app


configure_logging(default_settings.LOG_LEVEL)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG
    )
