from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class AnalysisStatus(str, Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded document held in memory for the duration of a request."""

    content: bytes
    mime_type: str
    filename: str

    @property
    def extension(self) -> str:
        """Lowercase filename extension including the dot, or '' if none."""
        return PurePath(self.filename or "").suffix.lower()


@dataclass(frozen=True)
class Section:
    """One paragraph-level unit of a document with its summary."""

    index: int
    original: str
    summary: str
    output_lang: str

    def to_dict(self) -> dict[str, object]:
        return {
            "section": self.index,
            "original": self.original,
            "summary": self.summary,
            "outputLang": self.output_lang,
        }


Glossary = dict[str, str]
