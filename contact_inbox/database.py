import threading
from abc import ABC, abstractmethod
from typing import List, Tuple

from fastapi import Request

from contact_inbox.exceptions import MessageNotFound
from contact_inbox.models.message import Message
from contact_inbox.utils.clock import now_iso, now_ms


class MessageStore(ABC):
    """
    Хранилище сообщений.

    Сообщение всегда лежит ровно в одном из двух списков: входящие
    (pending) или архив (archived).
    """

    @abstractmethod
    def append(self, message: Message) -> Message:
        """Добавить сообщение во входящие"""

    @abstractmethod
    def archive(self, message_id: int) -> Message:
        """Перенести сообщение из входящих в архив"""

    @abstractmethod
    def list_pending(self) -> List[Message]:
        """Входящие в порядке поступления"""

    @abstractmethod
    def list_archived(self) -> List[Message]:
        """Архив в порядке архивирования"""

    @abstractmethod
    def next_id(self) -> int:
        """Выдать новый идентификатор сообщения"""

    def create(self, name: str, email: str, message: str) -> Message:
        """Создать сообщение и положить его во входящие"""
        return self.append(Message(
            id=self.next_id(),
            name=name,
            email=email,
            message=message,
            timestamp=now_iso()
        ))

    def counts(self) -> Tuple[int, int]:
        return len(self.list_pending()), len(self.list_archived())


class InMemoryMessageStore(MessageStore):
    """Хранилище в памяти процесса, после перезапуска всё теряется"""

    def __init__(self, clock=now_ms):
        self._clock = clock
        self._lock = threading.Lock()
        self._pending: List[Message] = []
        self._archived: List[Message] = []
        self._last_id = 0

    def next_id(self) -> int:
        # Время в мс, но строго больше предыдущего id
        with self._lock:
            self._last_id = max(self._clock(), self._last_id + 1)
            return self._last_id

    def append(self, message: Message) -> Message:
        with self._lock:
            self._pending.append(message)
        return message

    def archive(self, message_id: int) -> Message:
        with self._lock:
            for index, message in enumerate(self._pending):
                if message.id == message_id:
                    break
            else:
                raise MessageNotFound(message_id)

            del self._pending[index]
            message.archived_at = now_iso()
            self._archived.append(message)

        return message

    def list_pending(self) -> List[Message]:
        with self._lock:
            return list(self._pending)

    def list_archived(self) -> List[Message]:
        with self._lock:
            return list(self._archived)


def get_store(request: Request) -> MessageStore:
    """Получение хранилища текущего приложения"""
    return request.app.state.store
