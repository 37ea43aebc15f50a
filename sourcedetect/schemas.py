from typing import List, Optional

from pydantic import BaseModel, ConfigDict


# Attribution DTOs
class AttributionRecord(BaseModel):
    source: Optional[str] = None
    medium: Optional[str] = None
    campaign: Optional[str] = None
    content: Optional[str] = None
    term: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AttributionRequest(BaseModel):
    url: Optional[str] = None
    referrer: Optional[str] = None
    referrer_exclusion: Optional[List[str]] = None

    model_config = ConfigDict(extra="forbid")
