from __future__ import annotations

import ipaddress
from typing import Dict, Optional
from urllib.parse import parse_qsl, unquote, urlsplit


# Code points a browser refuses inside a domain once percent-decoded
_FORBIDDEN_DOMAIN_CHARS = frozenset(" #%/:<>?@[\\]^|\x7f") | frozenset(chr(c) for c in range(0x20))


def _normalize_host(host: str) -> Optional[str]:
    if ":" in host:
        # urlsplit drops the brackets around IPv6 literals; zone ids are refused
        if "%" in host:
            return None
        try:
            return "[%s]" % ipaddress.IPv6Address(host).compressed
        except ValueError:
            return None

    try:
        domain = unquote(host, errors="strict").lower()
    except UnicodeDecodeError:
        return None
    if not domain or any(ch in _FORBIDDEN_DOMAIN_CHARS for ch in domain):
        return None

    if not domain.isascii():
        try:
            domain = domain.encode("idna").decode("ascii")
        except UnicodeError:
            return None
    return domain


def extract_hostname(url: Optional[str]) -> Optional[str]:
    """Return the hostname of an absolute URL the way a browser reports it.

    Mirrors ``new URL(url).hostname``: lowercased, percent-decoded, IDN labels
    in punycode, IPv6 literals in brackets. Relative references, bad ports,
    forbidden host characters and anything ``urlsplit`` rejects come back as
    None instead of raising.
    """
    if not isinstance(url, str):
        return None

    value = url.strip()
    if not value:
        return None

    try:
        parsed = urlsplit(value)
        host = parsed.hostname
        # Raises for non-numeric or out of range ports
        parsed.port
    except ValueError:
        return None

    # Browsers refuse to build a URL without a scheme (no base URL)
    if not parsed.scheme or not host:
        return None

    return _normalize_host(host)


def parse_query_string(query: Optional[str]) -> Dict[str, str]:
    """Parse a raw query string into a first-value-wins dict.

    Blank values are kept so ``?gclid`` reads as present with value "".
    """
    params: Dict[str, str] = {}
    if not query:
        return params

    raw = query[1:] if query.startswith("?") else query
    for key, value in parse_qsl(raw, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def query_from_url(url: Optional[str]) -> Dict[str, str]:
    if not isinstance(url, str) or not url:
        return {}
    try:
        query = urlsplit(url.strip()).query
    except ValueError:
        return {}
    return parse_query_string(query)


__all__ = ["extract_hostname", "parse_query_string", "query_from_url"]
