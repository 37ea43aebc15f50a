"""Traffic source detection for a single page view.

Follows the Google Analytics cascade, first match wins:

1. Google click id (gclid/gbraid/wbraid) -> google / cpc
2. utm_source present -> UTM values verbatim
3. Referrer on a known search engine -> <engine> / organic
4. Any other referrer not excluded -> <hostname> / referral
5. Otherwise direct traffic, all values None

Nothing is remembered between calls; session scoping is the caller's job.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Tuple

from .config import ClassifierConfig
from .engines import match_search_engine
from .schemas import AttributionRecord
from .utils.enrich import extract_hostname, query_from_url


logger = logging.getLogger("sourcedetect.classifier")

CLICK_ID_PARAMS = ("gclid", "gbraid", "wbraid")

TIER_PAID = "paid"
TIER_UTM = "utm"
TIER_ORGANIC = "organic"
TIER_EXCLUDED = "excluded"
TIER_REFERRAL = "referral"
TIER_DIRECT = "direct"

_DEFAULT_CONFIG = ClassifierConfig()


def _param(params: Mapping[str, Any], key: str) -> Optional[str]:
    if key not in params:
        return None
    value = params[key]
    # parse_qs style multi-values
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _is_excluded(hostname: str, exclusions: Iterable[str]) -> bool:
    return any(pattern in hostname for pattern in exclusions)


def _detect(params: Mapping[str, Any], referrer: Optional[str], config: ClassifierConfig) -> Tuple[str, AttributionRecord]:
    if any(key in params for key in CLICK_ID_PARAMS):
        return TIER_PAID, AttributionRecord(
            source="google",
            medium="cpc",
            campaign=_param(params, "utm_campaign"),
            content=_param(params, "utm_content"),
            term=_param(params, "utm_term"),
        )

    # utm_source is mandatory, the rest are optional
    if "utm_source" in params:
        return TIER_UTM, AttributionRecord(
            source=_param(params, "utm_source"),
            medium=_param(params, "utm_medium"),
            campaign=_param(params, "utm_campaign"),
            content=_param(params, "utm_content"),
            term=_param(params, "utm_term"),
        )

    hostname = extract_hostname(referrer)
    if hostname is None:
        return TIER_DIRECT, AttributionRecord()

    engine = match_search_engine(hostname)
    if engine:
        return TIER_ORGANIC, AttributionRecord(source=engine, medium="organic")

    if _is_excluded(hostname, config.referrer_exclusion):
        return TIER_EXCLUDED, AttributionRecord()

    return TIER_REFERRAL, AttributionRecord(source=hostname, medium="referral")


def classify_tier(
    query_params: Optional[Mapping[str, Any]] = None,
    referrer: Optional[str] = None,
    config: Optional[ClassifierConfig] = None,
) -> Tuple[str, AttributionRecord]:
    """Like :func:`classify`, also naming the tier that decided the record."""
    params: Mapping[str, Any] = query_params if query_params is not None else {}
    tier, record = _detect(params, referrer, config or _DEFAULT_CONFIG)
    logger.debug("tier=%s source=%s medium=%s", tier, record.source, record.medium)
    return tier, record


def classify(
    query_params: Optional[Mapping[str, Any]] = None,
    referrer: Optional[str] = None,
    config: Optional[ClassifierConfig] = None,
) -> AttributionRecord:
    """Attribute one page view from its query parameters and referrer."""
    return classify_tier(query_params, referrer, config)[1]


def classify_url_tier(
    page_url: Optional[str],
    referrer: Optional[str] = None,
    config: Optional[ClassifierConfig] = None,
) -> Tuple[str, AttributionRecord]:
    return classify_tier(query_from_url(page_url), referrer, config)


def classify_url(
    page_url: Optional[str],
    referrer: Optional[str] = None,
    config: Optional[ClassifierConfig] = None,
) -> AttributionRecord:
    """Same as :func:`classify`, reading parameters from a full page URL."""
    return classify_url_tier(page_url, referrer, config)[1]


__all__ = [
    "CLICK_ID_PARAMS",
    "TIER_DIRECT",
    "TIER_EXCLUDED",
    "TIER_ORGANIC",
    "TIER_PAID",
    "TIER_REFERRAL",
    "TIER_UTM",
    "classify",
    "classify_tier",
    "classify_url",
    "classify_url_tier",
]
