"""SPA Static Files — serves the built front end with index.html fallback.

Invariants:
    - Existing files are served as-is
    - Any unknown path under the mount returns index.html so the client-side
      router can resolve it
"""

from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.staticfiles import StaticFiles


class SPAStaticFiles(StaticFiles):
    """StaticFiles that falls back to index.html on 404."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)
