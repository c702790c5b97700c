from resume_ai.config.settings import Settings
from resume_ai.extraction.base import BaseTextExtractor
from resume_ai.extraction.docx_adapter import DocxAdapter
from resume_ai.extraction.exceptions import TextExtractionError
from resume_ai.extraction.pdfplumber_adapter import PdfPlumberAdapter
from resume_ai.extraction.pymupdf_adapter import PyMuPdfAdapter
from resume_ai.uploads.media_types import DOCX_MIME_TYPE, PDF_MIME_TYPE


class TextExtractorFactory:
    """Creates the correct text extractor for a media type based on settings."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    def __init__(self, pdf_engine: str) -> None:
        engine = pdf_engine.lower()
        adapter_cls = self.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(self.PDF_ADAPTERS)}"
            )
        self._extractors: dict[str, BaseTextExtractor] = {
            PDF_MIME_TYPE: adapter_cls(),
            DOCX_MIME_TYPE: DocxAdapter(),
        }

    @classmethod
    def create(cls, settings: Settings) -> "TextExtractorFactory":
        return cls(settings.pdf_engine)

    def for_media_type(self, mime_type: str) -> BaseTextExtractor:
        """Return the extractor registered for ``mime_type``.

        Raises:
            TextExtractionError: if no extractor handles the media type.
        """
        extractor = self._extractors.get(mime_type)
        if extractor is None:
            raise TextExtractionError(f"No text extractor for media type '{mime_type}'")
        return extractor
