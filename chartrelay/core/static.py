"""Static file fallback."""

import os
from typing import Optional, Tuple

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


def is_hidden_path(path: str) -> bool:
    """True when any component of ``path`` is a dotfile or dot-directory."""
    parts = path.replace("\\", "/").split("/")
    return any(part.startswith(".") and part != "." for part in parts)


class PublicStaticFiles(StaticFiles):
    """
    StaticFiles that hides dotfiles and answers 404 to non-GET/HEAD methods.

    The static directory defaults to the working directory, which is also
    where ``.env`` lives.
    """

    def lookup_path(self, path: str) -> Tuple[str, Optional[os.stat_result]]:
        if is_hidden_path(path):
            return "", None
        return super().lookup_path(path)

    async def get_response(self, path: str, scope: Scope) -> Response:
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
