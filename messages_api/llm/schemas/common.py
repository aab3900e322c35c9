"""Pydantic value types shared by requests and responses."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    RootModel,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class WireModel(BaseModel):
    """Immutable model whose optional fields vanish from the wire when unset."""

    model_config = ConfigDict(frozen=True)

    # Field names dropped from the serialized object while their value is None.
    omit_when_none: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_present_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in self.omit_when_none:
            if data.get(name) is None:
                data.pop(name, None)
        return data


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class StopReason(str, Enum):
    END_TURN = "end_turn"
    MAX_TOKENS = "max_tokens"
    STOP_SEQUENCE = "stop_sequence"
    TOOL_USE = "tool_use"


class ImageSource(WireModel):
    """Inline image payload; ``data`` is base64 and is not checked here."""

    type: str
    media_type: str
    data: str


class Tool(WireModel):
    omit_when_none: ClassVar[frozenset[str]] = frozenset({"description"})

    name: str
    description: str | None = None
    input_schema: JsonValue = Field(..., description="JSON schema for the tool input")


class Metadata(RootModel[dict[str, str]]):
    """Free-form request metadata, serialized as a flat string mapping."""

    model_config = ConfigDict(frozen=True)

    root: dict[str, str] = Field(default_factory=dict)

    @property
    def fields(self) -> dict[str, str]:
        return dict(self.root)


class Usage(WireModel):
    input_tokens: int = Field(..., ge=0, strict=True)
    output_tokens: int = Field(..., ge=0, strict=True)
