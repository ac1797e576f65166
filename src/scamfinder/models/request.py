"""Input models for a single scan.

An ``AnalysisRequest`` carries free text, a file, or both. When a file is
present the text is sent along as additional context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class TextPayload:
    """Free-form text submitted for analysis."""

    content: str = ""


@dataclass(frozen=True)
class FilePayload:
    """An uploaded file.

    ``declared_mime_type`` is whatever the uploader reported (browser,
    multipart header, CLI flag) and may be empty.
    """

    raw_bytes: bytes = field(repr=False)
    file_name: str
    declared_mime_type: str = ""
    size_bytes: int = -1

    def __post_init__(self) -> None:
        if self.size_bytes < 0:
            object.__setattr__(self, "size_bytes", len(self.raw_bytes))

    @classmethod
    def from_path(cls, path: Path, declared_mime_type: str = "") -> "FilePayload":
        """Read a file from disk into a payload."""
        data = path.read_bytes()
        return cls(raw_bytes=data, file_name=path.name, declared_mime_type=declared_mime_type, size_bytes=len(data))


@dataclass(frozen=True)
class AnalysisRequest:
    """One user-initiated scan: text, a file, or a file plus context text."""

    text: str = ""
    file: FilePayload | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())

    @property
    def is_empty(self) -> bool:
        return not self.has_text and self.file is None

    @classmethod
    def from_text(cls, payload: TextPayload) -> "AnalysisRequest":
        return cls(text=payload.content)
