from pathlib import Path

from resume_ai.analysis.base import BaseAnalyzer
from resume_ai.analysis.factory import AnalyzerFactory
from resume_ai.analysis.models import AnalysisResult
from resume_ai.config.settings import Settings
from resume_ai.extraction.exceptions import TextExtractionError
from resume_ai.extraction.factory import TextExtractorFactory
from resume_ai.logging.logger import Log
from resume_ai.processor.models import AnalysisKind
from resume_ai.uploads.models import Upload
from resume_ai.uploads.storage import TemporaryUploadStore
from resume_ai.uploads.validator import UploadValidator


class Processor:
    """Orchestrates one upload through the analysis pipeline.

    Pipeline: validate -> store -> load -> extract -> analyze -> cleanup.
    """

    def __init__(
        self,
        validator: UploadValidator,
        store: TemporaryUploadStore,
        extractors: TextExtractorFactory,
        analyzer: BaseAnalyzer,
    ) -> None:
        self._validator = validator
        self._store = store
        self._extractors = extractors
        self._analyzer = analyzer

    def process(self, upload: Upload, kind: AnalysisKind) -> AnalysisResult:
        """Run the full pipeline for an upload and return the analysis.

        Raises:
            UploadError: if the upload is rejected.
            TextExtractionError: if no text can be read from the document.
            ProviderError: if the AI provider fails.
        """
        Log.info(
            f"Processing upload {upload.id} ({upload.filename}, {upload.mime_type}, "
            f"{upload.size_bytes} bytes) for {kind.value} analysis"
        )

        # Step 1: Validate before touching disk
        self._validator.validate(upload)

        with self._store.stored(upload) as path:
            # Step 2: Load and extract text
            text = self._extract(path, upload)
            Log.info(f"Extracted {len(text)} chars from upload {upload.id}")

            # Step 3: Analyze
            with Log.timed(f"{kind.value} analysis of upload {upload.id}"):
                analysis = self._analyze(text, kind)

        Log.info(f"Upload {upload.id} processed: {analysis.kind} result")
        return analysis

    def _extract(self, path: Path, upload: Upload) -> str:
        raw_bytes = self._store.load(path)
        extractor = self._extractors.for_media_type(upload.mime_type.lower())
        text = extractor.extract(raw_bytes)
        if not text:
            raise TextExtractionError(
                f"No text could be extracted from '{upload.filename}'. "
                "The document might be image-based or empty."
            )
        return text

    def _analyze(self, text: str, kind: AnalysisKind) -> AnalysisResult:
        if kind is AnalysisKind.SCORE:
            return self._analyzer.score(text)
        if kind is AnalysisKind.INTERVIEW_PREP:
            return self._analyzer.interview_prep(text)
        return self._analyzer.analyze(text)


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    validator = UploadValidator(settings.allowed_mime_types, settings.max_upload_bytes)
    store = TemporaryUploadStore(Path(settings.upload_dir))
    extractors = TextExtractorFactory.create(settings)
    analyzer = AnalyzerFactory.create(settings)
    return Processor(
        validator=validator,
        store=store,
        extractors=extractors,
        analyzer=analyzer,
    )
