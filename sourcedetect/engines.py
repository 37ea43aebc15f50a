"""Search engine lookup for organic referrer detection."""
from __future__ import annotations

from typing import Optional, Tuple


# Hostname fragment => search engine name. Order matters: first match wins.
SEARCH_ENGINES: Tuple[Tuple[str, str], ...] = (
    ("google.", "google"),
    ("bing.", "bing"),
    ("yahoo.", "yahoo"),
    ("duckduckgo.", "duckduckgo"),
    ("yandex.", "yandex"),
    ("ecosia.", "ecosia"),
    ("msn.", "msn"),
    ("qwant.", "qwant"),
)


def match_search_engine(
    hostname: Optional[str],
    engines: Tuple[Tuple[str, str], ...] = SEARCH_ENGINES,
) -> Optional[str]:
    """Return the engine whose fragment appears anywhere in the hostname.

    Containment, not suffix matching: ``notgoogle.example`` counts as google.
    """
    if not hostname:
        return None
    for fragment, name in engines:
        if fragment in hostname:
            return name
    return None


__all__ = ["SEARCH_ENGINES", "match_search_engine"]
