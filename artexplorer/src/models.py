"""Typed views of AIC API payloads for callers that want them.

The client returns envelopes untouched; these models are only applied by
caller-side code such as the gallery service.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class ArtworkSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: Optional[str] = None
    artist_display: Optional[str] = None
    date_display: Optional[str] = None
    image_id: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None

