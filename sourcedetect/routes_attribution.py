import logging

from fastapi import APIRouter, Request

from .classifier import classify_tier, classify_url_tier
from .config import load_config
from .middleware import get_request_id, record_tier
from .schemas import AttributionRecord, AttributionRequest
from .utils.enrich import extract_hostname, parse_query_string


logger = logging.getLogger("sourcedetect.attribution")

router = APIRouter(prefix="/api", tags=["attribution"])


@router.post("/attribution", response_model=AttributionRecord)
def attribute_page_view(payload: AttributionRequest, request: Request):
    """Attribute a page view reported by an instrumentation snippet."""
    config = load_config().extend(payload.referrer_exclusion)
    tier, record = classify_url_tier(payload.url, payload.referrer, config)
    record_tier(request, tier)
    logger.info(
        "Attributed page view source=%s medium=%s referrer_host=%s request_id=%s",
        record.source,
        record.medium,
        extract_hostname(payload.referrer),
        get_request_id(request),
    )
    return record


@router.get("/attribution", response_model=AttributionRecord)
def attribute_landing(request: Request):
    """Attribute this request itself: its query string and Referer header."""
    # Historical "referer" header first, then the "referrer" spelling
    ref_header = request.headers.get("referer") or request.headers.get("referrer")
    tier, record = classify_tier(parse_query_string(request.url.query), ref_header, load_config())
    record_tier(request, tier)
    logger.info(
        "Attributed landing source=%s medium=%s request_id=%s",
        record.source,
        record.medium,
        get_request_id(request),
    )
    return record
