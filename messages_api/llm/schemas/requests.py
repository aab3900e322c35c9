"""Pydantic schemas for outbound requests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from pydantic import Field

from .common import Metadata, Tool, WireModel
from .content import Message, ToolChoice


class RequiredMessageParams(WireModel):
    """The three fields every create-message request must carry."""

    model: str
    messages: list[Message]
    max_tokens: int = Field(..., ge=0, strict=True)

    def to_create_params(self) -> CreateMessageParams:
        return CreateMessageParams(
            model=self.model,
            messages=list(self.messages),
            max_tokens=self.max_tokens,
        )


class CreateMessageParams(WireModel):
    """Complete create-message request.

    Optional fields start unset and are left out of the serialized object
    entirely. The ``with_*`` setters return a configured copy and never touch
    the instance they are called on, so calls can be chained and a setter
    called twice keeps the last value. Every copy is validated again, so a
    wrongly typed value raises ValidationError.
    """

    omit_when_none: ClassVar[frozenset[str]] = frozenset(
        {
            "system",
            "temperature",
            "stop_sequences",
            "stream",
            "top_k",
            "top_p",
            "tools",
            "tool_choice",
            "metadata",
        }
    )

    max_tokens: int = Field(..., ge=0, strict=True)
    messages: list[Message]
    model: str
    system: str | None = None
    temperature: float | None = None
    stop_sequences: list[str] | None = None
    stream: bool | None = None
    top_k: int | None = Field(None, ge=0, strict=True)
    top_p: float | None = None
    tools: list[Tool] | None = None
    tool_choice: ToolChoice | None = None
    metadata: Metadata | None = None

    @classmethod
    def from_required(cls, required: RequiredMessageParams) -> CreateMessageParams:
        return required.to_create_params()

    def _with(self, **changes: Any) -> CreateMessageParams:
        return type(self).model_validate({**dict(self), **changes})

    def with_system(self, system: str) -> CreateMessageParams:
        return self._with(system=system)

    def with_temperature(self, temperature: float) -> CreateMessageParams:
        return self._with(temperature=temperature)

    def with_stop_sequences(self, stop_sequences: Iterable[str]) -> CreateMessageParams:
        if isinstance(stop_sequences, str):
            raise TypeError("stop_sequences must be a sequence of strings, not a single string")
        return self._with(stop_sequences=list(stop_sequences))

    def with_stream(self, stream: bool) -> CreateMessageParams:
        return self._with(stream=stream)

    def with_top_k(self, top_k: int) -> CreateMessageParams:
        return self._with(top_k=top_k)

    def with_top_p(self, top_p: float) -> CreateMessageParams:
        return self._with(top_p=top_p)

    def with_tools(self, tools: Iterable[Tool]) -> CreateMessageParams:
        return self._with(tools=list(tools))

    def with_tool_choice(self, tool_choice: ToolChoice | Mapping[str, Any]) -> CreateMessageParams:
        return self._with(tool_choice=tool_choice)

    def with_metadata(self, metadata: Metadata | Mapping[str, str]) -> CreateMessageParams:
        return self._with(metadata=metadata)

    def to_count_tokens_params(self) -> CountMessageTokensParams:
        """Project this request onto the token counting request."""

        return CountMessageTokensParams(model=self.model, messages=list(self.messages))


class CountMessageTokensParams(WireModel):
    model: str
    messages: list[Message]
