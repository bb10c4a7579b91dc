from fastapi import APIRouter, Depends

from contact_inbox.database import MessageStore, get_store

router = APIRouter()


@router.get("/health")
async def health(store: MessageStore = Depends(get_store)):
    pending, archived = store.counts()
    return {
        "status": "ok",
        "pending": pending,
        "archived": archived
    }
