class RecordValidationError(Exception):
    """Raised when a stored analysis does not have the expected shape."""


class AnalysisNotFoundError(Exception):
    """Raised when an update targets an analysis that does not exist."""
