from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException


class PublicFiles(StaticFiles):
    """Статика фронтенда; всё, что не GET/HEAD, считается ненайденным"""

    async def get_response(self, path: str, scope):
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
