import re
from collections import Counter

# Any capitalized word of four or more letters.
_JARGON_RE = re.compile(r"\b[A-Z][a-zA-Z]{3,}\b")


def extract_jargon(text: str | None) -> list[str]:
    """Return candidate glossary terms, unique, in order of first appearance."""
    if not text:
        return []
    return list(dict.fromkeys(_JARGON_RE.findall(text)))


def count_jargon(text: str | None) -> list[tuple[str, int]]:
    """Return each candidate term with its number of occurrences, in first-seen order."""
    if not text:
        return []
    counts = Counter(_JARGON_RE.findall(text))
    return [(term, counts[term]) for term in extract_jargon(text)]
