from typing import Optional

from pydantic import BaseModel


class MessageCreate(BaseModel):
    """Схема отправки контактной формы"""
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    honeypot: Optional[str] = None  # скрытое поле, люди его не заполняют
