from contact_inbox.models.message import Message

__all__ = ["Message"]
