class ContactError(Exception):
    """Базовая ошибка обработки запроса контактной формы"""

    status_code = 400
    detail = "Bad request"

    def __init__(self, detail: str = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class MissingFields(ContactError):
    detail = "All fields are required"


class LengthOutOfRange(ContactError):
    detail = "Message length is out of range"


class BotDetected(ContactError):
    detail = "Bot submission detected"


class RateLimited(ContactError):
    """Превышен лимит отправок с одного адреса"""

    status_code = 429
    detail = "Too many submissions. Please try again later."

    def __init__(self, retry_after: int, detail: str = None):
        self.retry_after = retry_after
        super().__init__(detail)


class MessageNotFound(ContactError):
    status_code = 404
    detail = "Message not found"

    def __init__(self, message_id):
        self.message_id = message_id
        super().__init__()
