"""
SOLE RESPONSIBILITY: Defines the Pydantic data contracts for one decoded stream-json record,
serving as the single source of truth for the shapes the formatter understands.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class StreamModel(BaseModel):
    """Base for all stream records: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class TextBlock(StreamModel):
    """Narrative text produced by the assistant."""

    type: Literal["text"] = "text"
    text: str


class ToolUseBlock(StreamModel):
    """A tool invocation. `input` is normally a mapping but is not enforced here."""

    type: Literal["tool_use"] = "tool_use"
    name: str
    input: Any


class OtherBlock(StreamModel):
    """Catch-all for block types this filter does not render (thinking, tool_result, ...)."""

    type: str = "other"


def _block_tag(value: Any) -> Optional[str]:
    """
    Picks the union arm for a raw content block.
    Unknown string discriminators fall through to `other`; a missing or
    non-string discriminator returns None so validation fails.
    """
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)

    if not isinstance(tag, str):
        return None
    if tag in ("text", "tool_use"):
        return tag
    return "other"


ContentBlock = Annotated[
    Union[
        Annotated[TextBlock, Tag("text")],
        Annotated[ToolUseBlock, Tag("tool_use")],
        Annotated[OtherBlock, Tag("other")],
    ],
    Discriminator(_block_tag),
]


class AssistantMessage(StreamModel):
    """The `message` envelope of an assistant record."""

    content: List[ContentBlock]


class StreamMessage(StreamModel):
    """One decoded line of the stream, tagged by kind."""

    kind: str = Field(alias="type")
    message: Optional[AssistantMessage] = None
    result: Optional[str] = None

    @property
    def content(self) -> Optional[List[ContentBlock]]:
        """Content blocks, present only for assistant records that carry a message."""
        if self.kind != "assistant" or self.message is None:
            return None
        return self.message.content

    @property
    def result_text(self) -> Optional[str]:
        """Final result text, present only for result records."""
        if self.kind != "result":
            return None
        return self.result
