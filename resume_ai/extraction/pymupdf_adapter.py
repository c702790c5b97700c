import pymupdf

from resume_ai.extraction.base import BaseTextExtractor
from resume_ai.extraction.exceptions import TextExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Reads resume PDFs with PyMuPDF; faster on long or image-heavy documents."""

    def extract(self, file_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=file_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except TextExtractionError:
            raise
        except Exception as exc:
            raise TextExtractionError(f"pymupdf extraction failed: {exc}") from exc
