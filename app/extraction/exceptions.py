class ExtractionError(Exception):
    """Raised by an extraction adapter when the file content cannot be read."""
