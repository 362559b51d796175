from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field, StrictInt


class RatingRequest(BaseModel):
    # The web client historically posted ``storeId``; both spellings are accepted.
    store_id: int = Field(validation_alias=AliasChoices("store_id", "storeId"))
    # Strict: JSON true, "5" or 4.0 are rejected rather than coerced.
    # Range is checked by the rating service so the rejection carries a single message.
    rating: StrictInt


class RatingOut(BaseModel):
    id: int
    user_id: int
    store_id: int
    rating: int
    created_at: datetime

    class Config:
        from_attributes = True
