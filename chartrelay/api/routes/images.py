"""Image relay endpoint."""

import logging

from fastapi import APIRouter, Depends, Request

from chartrelay.api.dependencies import get_image_relay
from chartrelay.models.relay import ErrorResponse, ImageFetchResponse
from chartrelay.services.image_relay import ImageRelay
from chartrelay.utils.exceptions import ForbiddenURLError, MissingParameterError, RelayError
from chartrelay.utils.validators import parse_fetch_request

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["images"])

_REQUEST_BODY_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "required": ["imageUrl"],
                    "properties": {"imageUrl": {"type": "string"}},
                }
            }
        },
    }
}

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing imageUrl parameter"},
    403: {"model": ErrorResponse, "description": "URL outside the allow-list"},
    500: {"model": ErrorResponse, "description": "Upstream fetch failed"},
}


@router.post(
    "/fetch-image",
    response_model=ImageFetchResponse,
    responses=_ERROR_RESPONSES,
    openapi_extra=_REQUEST_BODY_SCHEMA,
)
async def fetch_image(
    request: Request,
    relay: ImageRelay = Depends(get_image_relay),
) -> ImageFetchResponse:
    """
    Fetch an allow-listed image server-side and return it as a data URI.

    - **imageUrl**: Remote image URL (JSON body)
    - Returns `{success, dataUri, size}`
    """
    # The body is parsed by hand so malformed JSON is a 400, not a 422.
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        req = parse_fetch_request(payload)
    except MissingParameterError as e:
        logger.warning(f"Rejected relay request: {e.message}", extra={"error_kind": e.kind})
        raise

    try:
        result = await relay.fetch_as_data_uri(req.imageUrl)
    except ForbiddenURLError as e:
        logger.warning(
            f"Rejected image URL: {e.message}",
            extra={"image_url": req.imageUrl[:500], "error_kind": e.kind},
        )
        raise
    except RelayError as e:
        logger.error(
            f"Error fetching image: {e.message}",
            extra={"image_url": req.imageUrl[:500], "error_kind": e.kind},
        )
        raise

    return ImageFetchResponse(success=True, dataUri=result.data_uri, size=result.size)
