import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response


logger = logging.getLogger("sourcedetect.request")

TIER_HEADER = "X-Attribution-Tier"


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


def attach_request_id(response: Response, request: Request) -> Response:
    request_id = get_request_id(request)
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


def record_tier(request: Request, tier: str) -> None:
    """Remember which tier attributed this request, for the access log."""
    request.state.attribution_tier = tier


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each collector request with an id and log how it was attributed.

    The access line carries the attribution tier (``-`` for requests that
    attribute nothing, such as health checks), and attribution responses
    expose the tier in ``X-Attribution-Tier``.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.attribution_tier = None

        start_time = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
        finally:
            tier = request.state.attribution_tier
            logger.info(
                "method=%s path=%s status=%s tier=%s ms=%s request_id=%s",
                request.method,
                request.url.path,
                status,
                tier or "-",
                int((time.perf_counter() - start_time) * 1000),
                request.state.request_id,
            )

        if tier:
            response.headers[TIER_HEADER] = tier
        return attach_request_id(response, request)
