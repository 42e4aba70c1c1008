from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            content: Raw uploaded file content.

        Returns:
            Extracted text as a single string, stripped of surrounding whitespace.

        Raises:
            ExtractionError: if the content cannot be read.
        """
