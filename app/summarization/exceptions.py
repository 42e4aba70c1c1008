class SummarizationError(Exception):
    """Raised when a summarization call fails."""


class SummarizationNetworkError(SummarizationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
