"""Dispatches an uploaded file to the text extractor for its format."""

from typing import ClassVar

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError
from app.logging.logger import Log
from app.processor.exceptions import (
    EmptyDocumentError,
    ExtractionFailedError,
    UnsupportedFormatError,
)
from app.processor.models import UploadedFile

PLAIN_TEXT = "text/plain"
PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class TextExtractor:
    """Converts uploaded bytes into plain text.

    The declared MIME type is consulted first; the filename extension is used
    as a fallback hint when the MIME type is missing or generic
    (browsers often send ``application/octet-stream`` for .docx files).
    """

    EXTENSION_TYPES: ClassVar[dict[str, str]] = {
        ".txt": PLAIN_TEXT,
        ".pdf": PDF,
        ".docx": DOCX,
    }

    def __init__(self, handlers: dict[str, BaseTextExtractor]) -> None:
        self._handlers = handlers

    def resolve_type(self, upload: UploadedFile) -> str:
        """Return the canonical MIME type that will handle this upload.

        Raises:
            UnsupportedFormatError: if neither the MIME type nor the extension is known.
        """
        mime_type = (upload.mime_type or "").split(";")[0].strip().lower()
        if mime_type in self._handlers:
            return mime_type
        by_extension = self.EXTENSION_TYPES.get(upload.extension)
        if by_extension is not None and by_extension in self._handlers:
            return by_extension
        raise UnsupportedFormatError(
            f"No extractor for mime type {upload.mime_type!r} "
            f"and filename {upload.filename!r}"
        )

    def extract(self, upload: UploadedFile) -> str:
        """Extract trimmed text from an uploaded file.

        Raises:
            UnsupportedFormatError: if the format has no registered handler.
            ExtractionFailedError: if the handler cannot read the content.
            EmptyDocumentError: if no text remains after trimming.
        """
        content_type = self.resolve_type(upload)
        handler = self._handlers[content_type]
        try:
            text = handler.extract(upload.content)
        except ExtractionError as exc:
            raise ExtractionFailedError(str(exc)) from exc

        text = text.strip()
        if not text:
            raise EmptyDocumentError(f"{upload.filename!r} contains no readable text")
        Log.info(f"Extracted {len(text)} chars from {upload.filename!r} as {content_type}")
        return text
