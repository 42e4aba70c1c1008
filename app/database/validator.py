"""Rebuilds typed sections and glossaries from stored JSONB values."""

from typing import Any

from app.database.exceptions import RecordValidationError
from app.processor.models import Glossary, Section


def build_sections(raw: Any, analysis_id: str) -> list[Section]:
    """Validate stored sections and build Section objects.

    Ordinals must form the contiguous sequence 1..N in stored order.

    Raises:
        RecordValidationError: on any shape violation.
    """
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise RecordValidationError(f"Analysis {analysis_id}: 'sections' must be a list")
    sections = [_build_section(item, i, analysis_id) for i, item in enumerate(raw)]
    for expected, section in enumerate(sections, start=1):
        if section.index != expected:
            raise RecordValidationError(
                f"Analysis {analysis_id}: section ordinal {section.index} "
                f"found where {expected} was expected"
            )
    return sections


def _build_section(raw: Any, position: int, analysis_id: str) -> Section:
    if not isinstance(raw, dict):
        raise RecordValidationError(
            f"Analysis {analysis_id}: section at position {position} must be an object"
        )
    index = raw.get("section")
    if not isinstance(index, int) or isinstance(index, bool):
        raise RecordValidationError(
            f"Analysis {analysis_id}: section at position {position}: "
            "'section' must be an integer"
        )
    for key in ("original", "summary", "outputLang"):
        if not isinstance(raw.get(key), str):
            raise RecordValidationError(
                f"Analysis {analysis_id}: section at position {position}: "
                f"'{key}' must be a string"
            )
    return Section(
        index=index,
        original=raw["original"],
        summary=raw["summary"],
        output_lang=raw["outputLang"],
    )


def build_glossary(raw: Any, analysis_id: str) -> Glossary:
    """Validate a stored glossary: a mapping of string terms to string definitions.

    Raises:
        RecordValidationError: on any shape violation.
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise RecordValidationError(f"Analysis {analysis_id}: 'glossary' must be an object")
    for term, definition in raw.items():
        if not isinstance(definition, str):
            raise RecordValidationError(
                f"Analysis {analysis_id}: glossary entry {term!r} must be a string"
            )
    return dict(raw)
