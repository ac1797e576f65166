"""Content categories and prompt parts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Union


class ContentCategory(str, Enum):
    """How an uploaded file's bytes are framed in the prompt."""

    IMAGE = "image"
    HTML_SOURCE = "html_source"
    EMAIL_CONTAINER = "email_container"
    GENERIC_DOCUMENT = "generic_document"
    NONE = "none"


class ClassifiedContent(NamedTuple):
    """Classifier output: category plus normalized MIME type."""

    category: ContentCategory
    mime_type: str


@dataclass(frozen=True)
class InlineBinary:
    """Raw bytes sent inline with their MIME type."""

    data: bytes = field(repr=False)
    mime_type: str


@dataclass(frozen=True)
class TextPart:
    """A plain text prompt part."""

    text: str


PromptPart = Union[InlineBinary, TextPart]


@dataclass(frozen=True)
class PromptPayload:
    """Ordered, immutable sequence of prompt parts.

    Content parts always precede the single trailing instruction part.
    """

    parts: tuple[PromptPart, ...] = ()

    def __iter__(self):
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index: int) -> PromptPart:
        return self.parts[index]

    @property
    def instruction(self) -> TextPart:
        """The trailing instruction part."""
        if not self.parts or not isinstance(self.parts[-1], TextPart):
            raise ValueError("Prompt payload has no trailing instruction part")
        return self.parts[-1]

    @property
    def has_inline_binary(self) -> bool:
        return any(isinstance(p, InlineBinary) for p in self.parts)
