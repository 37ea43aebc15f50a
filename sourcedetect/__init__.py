"""Google Analytics style traffic source detection."""

from .classifier import classify, classify_tier, classify_url
from .config import ClassifierConfig, load_config
from .engines import SEARCH_ENGINES
from .schemas import AttributionRecord
from .utils.enrich import extract_hostname, parse_query_string

__all__ = [
    "AttributionRecord",
    "ClassifierConfig",
    "SEARCH_ENGINES",
    "classify",
    "classify_tier",
    "classify_url",
    "extract_hostname",
    "load_config",
    "parse_query_string",
]
