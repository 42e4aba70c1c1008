from app.extraction.base import BaseTextExtractor


class PlainTextAdapter(BaseTextExtractor):
    """Decodes plain-text uploads as UTF-8."""

    def extract(self, content: bytes) -> str:
        text = content.decode("utf-8", errors="replace")
        return text.lstrip("\ufeff").strip()
