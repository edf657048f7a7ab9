import uuid
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

_MAX_REQUEST_ID_LEN = 128


def _incoming_request_id(request: Request) -> str | None:
    value = (request.headers.get("X-Request-ID") or "").strip()
    if not value or len(value) > _MAX_REQUEST_ID_LEN:
        return None
    return value


async def request_id_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    request_id = _incoming_request_id(request) or uuid.uuid4().hex
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response
