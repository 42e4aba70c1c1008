"""Section and glossary diff between two analyses."""

import re
from collections import defaultdict, deque
from dataclasses import dataclass, field

from app.database.models import AnalysisRecord

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SectionMatch:
    first: int
    second: int


@dataclass
class ComparisonResult:
    matched_sections: list[SectionMatch] = field(default_factory=list)
    unmatched_first: list[int] = field(default_factory=list)
    unmatched_second: list[int] = field(default_factory=list)
    only_in_first: list[str] = field(default_factory=list)
    only_in_second: list[str] = field(default_factory=list)
    common_terms: list[str] = field(default_factory=list)


def _normalize(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip().lower()


def compare_analyses(first: AnalysisRecord, second: AnalysisRecord) -> ComparisonResult:
    """Pair sections whose original text is identical (ignoring case and spacing).

    Each section is matched at most once; duplicates pair up in document order.
    """
    result = ComparisonResult()

    pending: dict[str, deque[int]] = defaultdict(deque)
    for section in second.sections:
        pending[_normalize(section.original)].append(section.index)

    matched_second: set[int] = set()
    for section in first.sections:
        candidates = pending.get(_normalize(section.original))
        if candidates:
            other = candidates.popleft()
            matched_second.add(other)
            result.matched_sections.append(SectionMatch(first=section.index, second=other))
        else:
            result.unmatched_first.append(section.index)
    result.unmatched_second = [
        section.index for section in second.sections if section.index not in matched_second
    ]

    result.common_terms = [term for term in first.glossary if term in second.glossary]
    result.only_in_first = [term for term in first.glossary if term not in second.glossary]
    result.only_in_second = [term for term in second.glossary if term not in first.glossary]
    return result
