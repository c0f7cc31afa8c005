"""Request ID tracking for log correlation."""

import re
import uuid
from contextvars import ContextVar, Token
from typing import Optional

REQUEST_ID_HEADER = "X-Request-ID"

# Client-supplied ids are echoed into logs and headers, so keep them boring.
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def generate_request_id() -> str:
    """Generate a unique request ID."""
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Get current request ID from context."""
    return request_id_var.get("")


def bind_request_id(incoming: Optional[str] = None) -> Token:
    """
    Bind a request ID to the current context.

    Reuses ``incoming`` (the caller's X-Request-ID header) when it looks sane,
    otherwise generates a fresh one.

    Returns:
        Token to pass to :func:`reset_request_id` once the request is done.
    """
    if incoming and _VALID_REQUEST_ID.match(incoming):
        request_id = incoming
    else:
        request_id = generate_request_id()
    return request_id_var.set(request_id)


def reset_request_id(token: Token) -> None:
    """Restore the request ID that was bound before ``token``."""
    request_id_var.reset(token)
