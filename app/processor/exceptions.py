class ProcessorError(Exception):
    """Base exception for all processor-related errors.

    ``public_message`` is what clients see; ``str(exc)`` may carry details
    that are only written to the log and the analysis record.
    """

    status_code: int = 500
    public_message: str = "Processing failed"


class UnsupportedFormatError(ProcessorError):
    """Raised when neither the MIME type nor the extension maps to a handler."""

    status_code = 400
    public_message = "Unsupported file type"


class ExtractionFailedError(ProcessorError):
    """Raised when a format handler cannot read the uploaded bytes."""

    status_code = 400
    public_message = "Could not read the uploaded document"


class EmptyDocumentError(ProcessorError):
    """Raised when a document yields no readable text."""

    status_code = 400
    public_message = "Document contains no readable text"


class InternalError(ProcessorError):
    """Raised when the analysis record cannot be created or persisted."""
