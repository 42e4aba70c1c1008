import io

import docx

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts paragraph text from Office Open XML (.docx) documents."""

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc
        # Blank-line joins keep paragraph boundaries visible to the sectionizer.
        return "\n\n".join(
            p.text.strip() for p in document.paragraphs if p.text.strip()
        )
