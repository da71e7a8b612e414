import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from catalog.core.config import settings
from catalog.core.logging import bind_request_id

_ACCEPTED_ID = re.compile(r"^[a-zA-Z0-9\-_.]{1,128}$")


def resolve_request_id(supplied: str | None) -> str:
    """Reuse a well-formed caller id, otherwise mint a UUID4."""
    if supplied and _ACCEPTED_ID.match(supplied):
        return supplied
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a request id for log correlation and echo it in the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        header = settings.request_id_header
        request_id = resolve_request_id(request.headers.get(header))
        request.state.request_id = request_id

        with bind_request_id(request_id):
            response = await call_next(request)

        response.headers[header] = request_id
        return response
