"""
Pydantic schemas for the watched list.
"""

from pydantic import BaseModel, Field


class WatchedRecord(BaseModel):
    """
    A rated movie in the watched list.

    Serialized with camelCase aliases (``model_dump(by_alias=True)``), which
    is the persisted shape.
    """

    id: str
    title: str
    year: str = ""
    poster: str = ""
    runtime_minutes: int = Field(0, alias="runtimeMinutes", ge=0)
    external_rating: float = Field(0.0, alias="externalRating", ge=0.0)
    user_rating: int = Field(..., alias="userRating", ge=1)
    interaction_count: int = Field(0, alias="interactionCount", ge=0)

    class Config:
        populate_by_name = True
        frozen = True


class WatchedSummary(BaseModel):
    """Aggregate statistics over the watched list."""

    count: int = 0
    mean_external_rating: float = 0.0
    mean_user_rating: float = 0.0
    mean_runtime_minutes: float = 0.0
