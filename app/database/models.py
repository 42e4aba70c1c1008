from dataclasses import dataclass, field
from datetime import datetime

from app.processor.models import Glossary, Section


@dataclass
class AnalysisRecord:
    """Represents a row from the analyses table."""

    id: str
    user_id: str
    filename: str
    mime_type: str
    output_lang: str
    status: str
    input_lang: str | None = None
    sections: list[Section] = field(default_factory=list)
    glossary: Glossary = field(default_factory=dict)
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class AnalysisSummary:
    """History-list projection of an analysis, without section text."""

    id: str
    filename: str
    mime_type: str
    status: str
    input_lang: str | None
    output_lang: str
    section_count: int
    glossary_size: int
    created_at: datetime | None = None
