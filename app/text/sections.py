import re

# A blank line, or sentence-ending punctuation followed by a line break.
_SECTION_BOUNDARY_RE = re.compile(r"\n\s*\n|(?<=[.!?])[ \t]*\n")

DEFAULT_CHUNK_SIZE = 500


def split_into_sections(text: str | None) -> list[str]:
    """Split document text into trimmed, non-empty paragraphs in order."""
    if not text:
        return []
    return [part.strip() for part in _SECTION_BOUNDARY_RE.split(text) if part.strip()]


def chunk_section(section: str, max_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Cut a section into consecutive pieces of at most ``max_size`` characters.

    The pieces are a staging aid for size-limited APIs and may cut
    mid-sentence; joining them yields the input.
    """
    if max_size < 1:
        raise ValueError(f"max_size must be >= 1, got {max_size}")
    return [section[start:start + max_size] for start in range(0, len(section), max_size)]
