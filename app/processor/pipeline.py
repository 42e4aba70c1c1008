from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from app.processor.models import Glossary, Section, UploadedFile


class PipelineState(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    DETECTING_LANGUAGE = "detecting_language"
    TRANSLATING = "translating"
    SECTIONIZING = "sectionizing"
    PROCESSING_SECTION = "processing_section"
    FINALIZING = "finalizing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    user_id: str
    output_lang: str
    state: PipelineState = PipelineState.IDLE
    analysis_id: str | None = None
    text: str = ""
    input_lang: str | None = None
    section_texts: list[str] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)
    glossary: Glossary = field(default_factory=dict)
    error_message: str = ""


class PipelineStep(ABC):
    state: ClassVar[PipelineState]

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
