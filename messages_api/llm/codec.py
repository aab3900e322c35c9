"""Wire encoding and decoding for Messages API values.

Encoders return plain JSON-ready values. Decoders take parsed JSON (dicts,
lists, strings, numbers) and either return a typed value or raise
``DecodeError``; malformed input is never coerced into a default variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.exceptions import DecodeError
from .schemas.content import (
    CONTENT_BLOCK_TYPES,
    TOOL_CHOICE_TYPES,
    ContentBlock,
    Message,
    MessageContentBlocks,
    MessageContentText,
    ToolChoice,
)
from .schemas.requests import CountMessageTokensParams, CreateMessageParams
from .schemas.responses import CountMessageTokensResponse, CreateMessageResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _location(loc: tuple[Any, ...]) -> str | None:
    return ".".join(str(part) for part in loc) or None


def _from_validation_error(exc: ValidationError, what: str) -> DecodeError:
    error = exc.errors()[0]
    loc = tuple(error["loc"])
    field = _location(loc)
    ctx = error.get("ctx") or {}
    kind = error["type"]

    if kind == "union_tag_invalid":
        tag = ctx.get("tag")
        return DecodeError(f"unrecognized type tag {tag!r} in {what} at {field}", field=field, tag=tag)
    if kind == "union_tag_not_found":
        return DecodeError(f"missing 'type' tag in {what} at {field}", field=field)
    if kind == "missing":
        return DecodeError(f"{what} is missing required field {loc[-1]!r}", field=field)
    return DecodeError(f"invalid {what} at {field or '<root>'}: {error['msg']}", field=field)


def _validate(model: type[ModelT], data: Any, what: str) -> ModelT:
    if not isinstance(data, Mapping):
        raise DecodeError(f"{what} must be a JSON object, got {_json_type(data)}")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise _from_validation_error(exc, what) from exc


def _dispatch(data: Any, variants: Mapping[str, type[BaseModel]], what: str) -> Any:
    if not isinstance(data, Mapping):
        raise DecodeError(f"{what} must be a JSON object, got {_json_type(data)}")
    tag = data.get("type")
    if tag is None:
        raise DecodeError(f"{what} is missing its 'type' tag", field="type")
    if not isinstance(tag, str) or tag not in variants:
        raise DecodeError(f"unrecognized {what} type {tag!r}", field="type", tag=str(tag))
    return _validate(variants[tag], data, what)


def encode_content_block(block: ContentBlock) -> dict[str, Any]:
    return block.model_dump(mode="json")


def decode_content_block(data: Any) -> ContentBlock:
    """Read the ``type`` tag, then build the matching block variant."""

    return _dispatch(data, CONTENT_BLOCK_TYPES, "content block")


def encode_tool_choice(tool_choice: ToolChoice) -> dict[str, Any]:
    return tool_choice.model_dump(mode="json")


def decode_tool_choice(data: Any) -> ToolChoice:
    return _dispatch(data, TOOL_CHOICE_TYPES, "tool choice")


def encode_message_content(content: MessageContentText | MessageContentBlocks) -> str | list[Any]:
    """Return the bare string or the array of tagged block objects."""

    return content.model_dump(mode="json")["content"]


def decode_message_content(value: Any) -> MessageContentText | MessageContentBlocks:
    """Pick the content shape from the JSON type of ``value``.

    A string is text content and an array is block content; every other JSON
    type is rejected before any field is read.
    """

    if isinstance(value, str):
        return MessageContentText(content=value)
    if not isinstance(value, list):
        raise DecodeError(
            f"message content must be a string or an array, got {_json_type(value)}",
            field="content",
        )

    blocks = []
    for index, item in enumerate(value):
        try:
            blocks.append(decode_content_block(item))
        except DecodeError as exc:
            field = f"content.{index}" + (f".{exc.field}" if exc.field else "")
            raise DecodeError(str(exc), field=field, tag=exc.tag) from exc
    return MessageContentBlocks(content=blocks)


def encode_message(message: Message) -> dict[str, Any]:
    return message.model_dump(mode="json")


def decode_message(data: Any) -> Message:
    return _validate(Message, data, "message")


def encode_create_message_params(params: CreateMessageParams) -> dict[str, Any]:
    """Serialize a request; optional fields that were never set are absent."""

    return params.model_dump(mode="json")


def encode_count_tokens_params(params: CountMessageTokensParams) -> dict[str, Any]:
    return params.model_dump(mode="json")


def decode_create_message_response(data: Any) -> CreateMessageResponse:
    return _validate(CreateMessageResponse, data, "message response")


def decode_count_tokens_response(data: Any) -> CountMessageTokensResponse:
    return _validate(CountMessageTokensResponse, data, "token count response")
