"""Classifier configuration, read from the environment where needed."""
from __future__ import annotations

import os
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict


def _dedupe(items: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(items))


class ClassifierConfig(BaseModel):
    """Hostname substrings that must never be reported as a referral source.

    Typically the site's own domains and payment gateways. Entries are matched
    verbatim as substrings of the referrer hostname.
    """

    referrer_exclusion: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def extend(self, extra: Optional[Iterable[str]]) -> "ClassifierConfig":
        if not extra:
            return self
        return ClassifierConfig(referrer_exclusion=_dedupe([*self.referrer_exclusion, *extra]))


def get_referrer_exclusion() -> Tuple[str, ...]:
    raw = os.getenv("REFERRER_EXCLUSION", "")
    return _dedupe(part.strip() for part in raw.split(",") if part.strip())


def load_config() -> ClassifierConfig:
    return ClassifierConfig(referrer_exclusion=get_referrer_exclusion())


__all__ = ["ClassifierConfig", "get_referrer_exclusion", "load_config"]
