import logging

from fastapi import APIRouter, Depends, Request

from contact_inbox.database import MessageStore, get_store
from contact_inbox.exceptions import BotDetected
from contact_inbox.guard import SubmissionChecker
from contact_inbox.schemas.message import MessageCreate

logger = logging.getLogger(__name__)

router = APIRouter()


def get_checker(request: Request) -> SubmissionChecker:
    return request.app.state.checker


@router.post("")
async def submit_message(
        data: MessageCreate,
        store: MessageStore = Depends(get_store),
        checker: SubmissionChecker = Depends(get_checker)
):
    """Сохранить сообщение из контактной формы"""
    try:
        checker.check(data)
    except BotDetected:
        logger.warning(f"🤖 Заблокирована отправка бота: {data.email}")
        raise

    message = store.create(name=data.name, email=data.email, message=data.message)
    logger.info(f"✅ Сообщение получено от: {message.email}")

    return {
        "success": True,
        "message": "Message saved!",
        "data": message.to_dict()
    }


@router.get("")
async def get_messages(store: MessageStore = Depends(get_store)):
    """Получить входящие сообщения"""
    return [msg.to_dict() for msg in store.list_pending()]
