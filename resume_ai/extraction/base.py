from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Turns an uploaded resume document into the plain text sent to the AI provider."""

    @abstractmethod
    def extract(self, file_bytes: bytes) -> str:
        """Return the resume's text, pages or blocks joined by newlines and stripped.

        An empty string means the document holds no extractable text (for
        example a scanned resume); callers decide whether that is an error.

        Raises:
            TextExtractionError: if the bytes cannot be parsed as this format.
        """
