from abc import ABC, abstractmethod

from app.summarization.models import SectionSummary


class BaseSummarizer(ABC):
    """Contract for all summarizers."""

    @abstractmethod
    def summarize(self, text: str) -> SectionSummary:
        """Produce a plain-language summary of one document section.

        Args:
            text: Original section text.

        Returns:
            SectionSummary whose text is never empty; failed chunks are
            replaced by placeholders instead of raising.
        """
