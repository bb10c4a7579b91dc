from contact_inbox.exceptions import BotDetected, LengthOutOfRange, MissingFields
from contact_inbox.schemas.message import MessageCreate


class SubmissionChecker:
    """
    Проверка отправленной формы.

    Проверки выполняются по порядку до первой ошибки:
    honeypot -> обязательные поля -> длина сообщения.
    """

    REQUIRED_FIELDS = ("name", "email", "message")

    def __init__(self, min_length: int = 5, max_length: int = 1000):
        self.min_length = min_length
        self.max_length = max_length
        self.checks = (
            self.check_honeypot,
            self.check_required_fields,
            self.check_length,
        )

    def check(self, data: MessageCreate):
        for check in self.checks:
            check(data)

    def check_honeypot(self, data: MessageCreate):
        if data.honeypot and data.honeypot.strip():
            raise BotDetected()

    def check_required_fields(self, data: MessageCreate):
        if not all(getattr(data, field) for field in self.REQUIRED_FIELDS):
            raise MissingFields()

    def check_length(self, data: MessageCreate):
        length = len(data.message)

        if length < self.min_length:
            raise LengthOutOfRange("Message is too short")
        if length > self.max_length:
            raise LengthOutOfRange("Message is too long")
