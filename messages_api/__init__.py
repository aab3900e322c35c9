"""Typed request/response model for the Messages API."""

from .core.exceptions import ApiError, DecodeError, MessageError, MessagesApiError, RequestFailed
from .llm.codec import (
    decode_content_block,
    decode_count_tokens_response,
    decode_create_message_response,
    decode_message,
    decode_message_content,
    decode_tool_choice,
    encode_content_block,
    encode_count_tokens_params,
    encode_create_message_params,
    encode_message,
    encode_message_content,
    encode_tool_choice,
)
from .llm.schemas import (
    ContentBlock,
    ContentBlockImage,
    ContentBlockText,
    ContentBlockToolResult,
    ContentBlockToolUse,
    CountMessageTokensParams,
    CountMessageTokensResponse,
    CreateMessageParams,
    CreateMessageResponse,
    ImageSource,
    Message,
    MessageContent,
    MessageContentBlocks,
    MessageContentText,
    Metadata,
    RequiredMessageParams,
    Role,
    StopReason,
    Tool,
    ToolChoice,
    ToolChoiceAny,
    ToolChoiceAuto,
    ToolChoiceTool,
    Usage,
    image_block,
    text_block,
)
from .llm.services import HttpMessageClient, MessageClient

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ContentBlock",
    "ContentBlockImage",
    "ContentBlockText",
    "ContentBlockToolResult",
    "ContentBlockToolUse",
    "CountMessageTokensParams",
    "CountMessageTokensResponse",
    "CreateMessageParams",
    "CreateMessageResponse",
    "DecodeError",
    "HttpMessageClient",
    "ImageSource",
    "Message",
    "MessageClient",
    "MessageContent",
    "MessageContentBlocks",
    "MessageContentText",
    "MessageError",
    "MessagesApiError",
    "Metadata",
    "RequestFailed",
    "RequiredMessageParams",
    "Role",
    "StopReason",
    "Tool",
    "ToolChoice",
    "ToolChoiceAny",
    "ToolChoiceAuto",
    "ToolChoiceTool",
    "Usage",
    "decode_content_block",
    "decode_count_tokens_response",
    "decode_create_message_response",
    "decode_message",
    "decode_message_content",
    "decode_tool_choice",
    "encode_content_block",
    "encode_count_tokens_params",
    "encode_create_message_params",
    "encode_message",
    "encode_message_content",
    "encode_tool_choice",
    "image_block",
    "text_block",
]
