import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .middleware import attach_request_id


logger = logging.getLogger("sourcedetect.errors")

_CODE_MAP = {
    404: "not_found",
    405: "method_not_allowed",
}


def json_error(code: str, *, status_code: int = 400, detail: Optional[str] = None) -> JSONResponse:
    payload: Dict[str, Any] = {"error": code, "detail": detail or code}
    return JSONResponse(status_code=status_code, content=payload)


def _validation_detail(exc: RequestValidationError) -> str:
    """Flatten pydantic errors to ``field: message`` pairs, e.g. ``session: Extra inputs are not permitted``."""
    parts = []
    for err in exc.errors():
        # Drop the leading "body" so fields read like the page-view payload
        loc = [str(item) for item in err.get("loc", ()) if item != "body"]
        parts.append("%s: %s" % (".".join(loc) or "body", err.get("msg", "invalid")))
    return "; ".join(parts) or "invalid page view payload"


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        code = _CODE_MAP.get(exc.status_code, "http_error")
        resp = json_error(code, status_code=exc.status_code, detail=str(exc.detail))
        return attach_request_id(resp, request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        resp = json_error("invalid_page_view", status_code=422, detail=_validation_detail(exc))
        return attach_request_id(resp, request)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Attribution failed: %s", exc)
        resp = json_error("internal_error", status_code=500, detail="unexpected server error")
        return attach_request_id(resp, request)
