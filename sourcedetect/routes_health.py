from fastapi import APIRouter

from .config import get_referrer_exclusion
from .engines import SEARCH_ENGINES


router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz():
    return {"ok": True}


@router.get("/healthz/config")
def healthz_config():
    return {
        "referrer_exclusion": list(get_referrer_exclusion()),
        "search_engines": [name for _, name in SEARCH_ENGINES],
    }
