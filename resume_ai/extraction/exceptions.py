class TextExtractionError(Exception):
    """Raised when text cannot be extracted from an uploaded document."""
