import io

import docx

from resume_ai.extraction.base import BaseTextExtractor
from resume_ai.extraction.exceptions import TextExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts paragraph and table text from DOCX using python-docx."""

    def extract(self, file_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(file_bytes))
            lines = [p.text for p in document.paragraphs if p.text.strip()]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        lines.append(" | ".join(cells))
            return "\n".join(lines).strip()
        except Exception as exc:
            raise TextExtractionError(f"python-docx extraction failed: {exc}") from exc
