from typing import Optional


class Message:
    """Модель сообщения из контактной формы"""

    def __init__(self, id: int, name: str, email: str, message: str, timestamp: str,
                 archived_at: Optional[str] = None):
        self._id = id
        self.name = name
        self.email = email
        self.message = message
        self.timestamp = timestamp
        self.archived_at = archived_at

    @property
    def id(self) -> int:
        return self._id

    @property
    def is_archived(self) -> bool:
        return self.archived_at is not None

    def to_dict(self):
        """Преобразование в словарь"""
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "timestamp": self.timestamp,
        }
        if self.archived_at is not None:
            data["archivedAt"] = self.archived_at
        return data

    def __repr__(self):
        return f"<Message id={self.id} email={self.email!r}>"
