"""Pydantic schemas for service replies."""

from __future__ import annotations

from pydantic import Field

from .common import Role, StopReason, Usage, WireModel
from .content import ContentBlock


class CreateMessageResponse(WireModel):
    content: list[ContentBlock]
    id: str
    model: str
    role: Role
    stop_reason: StopReason | None = None
    stop_sequence: str | None = None
    type: str
    usage: Usage


class CountMessageTokensResponse(WireModel):
    input_tokens: int = Field(..., ge=0, strict=True)
