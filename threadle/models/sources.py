"""Models for content fetched from the upstream source provider."""

from typing import Optional

from pydantic import BaseModel, Field


class SourceItem(BaseModel):
    """A recent thread in a content category."""

    id: str = Field(..., description="Provider identifier for the thread")
    title: str = Field(default="", description="Thread title")
    reply_count: Optional[int] = Field(None, description="Number of replies, when the provider reports it")
    permalink: str = Field(..., description="Path of the thread relative to the provider's site")


class SourceReply(BaseModel):
    """A top-level reply to a thread."""

    body: str = Field(..., description="Raw reply text")
