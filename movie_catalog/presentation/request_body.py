from fastapi import Request

from movie_catalog.applications.interfaces.decoding import BODY_TOO_LARGE, MAX_BODY_BYTES
from movie_catalog.domain.exceptions import FormatError


async def read_body(request: Request, limit: int = MAX_BODY_BYTES) -> bytes:
    """Reads the request body, giving up as soon as it grows past ``limit`` bytes."""
    content_length = request.headers.get("content-length", "")
    if content_length.isdigit() and int(content_length) > limit:
        raise FormatError(BODY_TOO_LARGE)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        # Content-Length may be absent (chunked) or understated
        if len(body) > limit:
            raise FormatError(BODY_TOO_LARGE)
    return bytes(body)
