"""Pydantic schemas for message content: content blocks, tool choice and turns.

Two kinds of union live here. Content blocks and tool choices are tagged by
their ``type`` field. Message content is untagged: a bare JSON string is the
text form, a JSON array is the block form, and nothing else is accepted.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    Discriminator,
    Field,
    JsonValue,
    SerializerFunctionWrapHandler,
    Tag,
    field_serializer,
    model_validator,
)

from .common import ImageSource, Role, WireModel


class ContentBlockText(WireModel):
    type: Literal["text"] = "text"
    text: str


class ContentBlockImage(WireModel):
    type: Literal["image"] = "image"
    source: ImageSource


class ContentBlockToolUse(WireModel):
    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: JsonValue


class ContentBlockToolResult(WireModel):
    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: str


ContentBlock = Annotated[
    Union[ContentBlockText, ContentBlockImage, ContentBlockToolUse, ContentBlockToolResult],
    Field(discriminator="type"),
]

CONTENT_BLOCK_TYPES: dict[str, type[WireModel]] = {
    "text": ContentBlockText,
    "image": ContentBlockImage,
    "tool_use": ContentBlockToolUse,
    "tool_result": ContentBlockToolResult,
}


class ToolChoiceAuto(WireModel):
    """Let the model decide whether to call a tool."""

    type: Literal["auto"] = "auto"


class ToolChoiceAny(WireModel):
    """The model must call one of the provided tools."""

    type: Literal["any"] = "any"


class ToolChoiceTool(WireModel):
    """The model must call the named tool."""

    type: Literal["tool"] = "tool"
    name: str


ToolChoice = Annotated[
    Union[ToolChoiceAuto, ToolChoiceAny, ToolChoiceTool],
    Field(discriminator="type"),
]

TOOL_CHOICE_TYPES: dict[str, type[WireModel]] = {
    "auto": ToolChoiceAuto,
    "any": ToolChoiceAny,
    "tool": ToolChoiceTool,
}


class MessageContentText(WireModel):
    content: str

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"content": data}
        return data


class MessageContentBlocks(WireModel):
    content: list[ContentBlock]

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"content": data}
        return data


def message_content_shape(value: Any) -> str | None:
    """Classify message content by JSON type alone; None means neither shape."""

    if isinstance(value, (str, MessageContentText)):
        return "text"
    if isinstance(value, (list, MessageContentBlocks)):
        return "blocks"
    return None


MessageContent = Annotated[
    Union[
        Annotated[MessageContentText, Tag("text")],
        Annotated[MessageContentBlocks, Tag("blocks")],
    ],
    Discriminator(
        message_content_shape,
        custom_error_type="message_content_shape",
        custom_error_message="message content must be a string or an array of content blocks",
    ),
]


class Message(WireModel):
    """One conversation turn; content is flattened into the message object."""

    role: Role
    content: MessageContent

    @field_serializer("content", mode="wrap")
    def flatten_content(self, value: Any, handler: SerializerFunctionWrapHandler) -> Any:
        return handler(value)["content"]

    @classmethod
    def new_text(cls, role: Role | str, text: str) -> Message:
        return cls(role=role, content=MessageContentText(content=text))

    @classmethod
    def new_blocks(cls, role: Role | str, blocks: list[ContentBlock]) -> Message:
        return cls(role=role, content=MessageContentBlocks(content=list(blocks)))


def text_block(text: str) -> ContentBlockText:
    return ContentBlockText(text=text)


def image_block(source_type: str, media_type: str, data: str) -> ContentBlockImage:
    return ContentBlockImage(
        source=ImageSource(type=source_type, media_type=media_type, data=data)
    )
