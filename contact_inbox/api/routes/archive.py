import logging
import re

from fastapi import APIRouter, Depends

from contact_inbox.database import MessageStore, get_store
from contact_inbox.exceptions import MessageNotFound

logger = logging.getLogger(__name__)

router = APIRouter()

# Ведущее целое число, как parseInt: "12abc" -> 12, "abc" -> нет
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_message_id(raw: str):
    match = LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


@router.post("/archive/{message_id}")
async def archive_message(message_id: str, store: MessageStore = Depends(get_store)):
    """Перенести сообщение в архив"""
    try:
        parsed_id = parse_message_id(message_id)
        if parsed_id is None:
            raise MessageNotFound(message_id)
        message = store.archive(parsed_id)
    except MessageNotFound:
        logger.warning(f"❌ Архивация не удалась: сообщение {message_id} не найдено")
        raise

    logger.info(f"📦 Сообщение {message.id} архивировано в {message.archived_at}")

    return {
        "success": True,
        "message": "Message archived",
        "data": message.to_dict()
    }


@router.get("/archived")
async def get_archived(store: MessageStore = Depends(get_store)):
    """Получить архив"""
    return [msg.to_dict() for msg in store.list_archived()]
