from abc import ABC, abstractmethod


class BaseSummarizationClient(ABC):
    """Contract for provider-specific summarization clients."""

    @property
    def is_configured(self) -> bool:
        """False when the provider credential is missing."""
        return True

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        prompt: str,
        max_new_tokens: int,
        temperature: float,
    ) -> str:
        """Return the provider's completion for ``prompt`` as plain text.

        Raises:
            SummarizationError: on any provider failure.
        """
