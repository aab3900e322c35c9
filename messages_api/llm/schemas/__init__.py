"""Messages API schemas."""

from .common import ImageSource, Metadata, Role, StopReason, Tool, Usage, WireModel
from .content import (
    CONTENT_BLOCK_TYPES,
    TOOL_CHOICE_TYPES,
    ContentBlock,
    ContentBlockImage,
    ContentBlockText,
    ContentBlockToolResult,
    ContentBlockToolUse,
    Message,
    MessageContent,
    MessageContentBlocks,
    MessageContentText,
    ToolChoice,
    ToolChoiceAny,
    ToolChoiceAuto,
    ToolChoiceTool,
    image_block,
    text_block,
)
from .requests import CountMessageTokensParams, CreateMessageParams, RequiredMessageParams
from .responses import CountMessageTokensResponse, CreateMessageResponse

__all__ = [
    "CONTENT_BLOCK_TYPES",
    "TOOL_CHOICE_TYPES",
    "ContentBlock",
    "ContentBlockImage",
    "ContentBlockText",
    "ContentBlockToolResult",
    "ContentBlockToolUse",
    "CountMessageTokensParams",
    "CountMessageTokensResponse",
    "CreateMessageParams",
    "CreateMessageResponse",
    "ImageSource",
    "Message",
    "MessageContent",
    "MessageContentBlocks",
    "MessageContentText",
    "Metadata",
    "RequiredMessageParams",
    "Role",
    "StopReason",
    "Tool",
    "ToolChoice",
    "ToolChoiceAny",
    "ToolChoiceAuto",
    "ToolChoiceTool",
    "Usage",
    "WireModel",
    "image_block",
    "text_block",
]
