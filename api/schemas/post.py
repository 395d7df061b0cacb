"""Request/response shapes for the posts endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from api.db.models import INTEGER_MAX, INTEGER_MIN


class PostPayload(BaseModel):
    """Body accepted by create and update. ``post_id`` is never taken from here.

    ``user_id`` must be a JSON integer that fits the column; booleans and
    floats such as ``1.0`` are rejected.
    """

    model_config = ConfigDict(extra="ignore")

    user_id: int = Field(strict=True, ge=INTEGER_MIN, le=INTEGER_MAX)
    post_title: str
    post_body: Optional[str] = None


class PostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    post_id: int
    user_id: int
    post_title: str
    post_body: Optional[str] = None
