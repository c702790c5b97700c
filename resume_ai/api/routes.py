from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from resume_ai.processor.models import AnalysisKind
from resume_ai.processor.processor import Processor
from resume_ai.uploads.exceptions import (
    MissingFileError,
    MultipleFilesError,
    UploadTooLargeError,
)
from resume_ai.uploads.models import Upload

UPLOAD_FIELD = "file"

router = APIRouter()


async def read_upload(request: Request, max_upload_bytes: int) -> Upload:
    """Read exactly one file from the multipart form field ``file``.

    At most ``max_upload_bytes + 1`` bytes are read into memory.

    Raises:
        MissingFileError: if the field is absent or holds no file.
        MultipleFilesError: if the field holds more than one file.
        UploadTooLargeError: if the file exceeds ``max_upload_bytes``.
    """
    form = await request.form()
    try:
        files = [item for item in form.getlist(UPLOAD_FIELD) if isinstance(item, UploadFile)]
        if not files:
            raise MissingFileError(f"No file uploaded under form field '{UPLOAD_FIELD}'")
        if len(files) > 1:
            raise MultipleFilesError(
                f"Expected one file under form field '{UPLOAD_FIELD}', got {len(files)}"
            )
        file = files[0]
        if file.size is not None and file.size > max_upload_bytes:
            raise UploadTooLargeError(
                f"Uploaded file is {file.size} bytes (max {max_upload_bytes})"
            )
        content = await file.read(max_upload_bytes + 1)
        if len(content) > max_upload_bytes:
            raise UploadTooLargeError(f"Uploaded file exceeds {max_upload_bytes} bytes")
        return Upload(
            content=content,
            mime_type=file.content_type or "application/octet-stream",
            filename=file.filename or "upload",
        )
    finally:
        await form.close()


async def run_analysis(request: Request, kind: AnalysisKind) -> dict[str, object]:
    upload = await read_upload(request, request.app.state.settings.max_upload_bytes)
    processor: Processor = request.app.state.processor
    result = await run_in_threadpool(processor.process, upload, kind)
    return result.to_payload()


@router.post("/analyze")
async def analyze(request: Request) -> dict[str, object]:
    """Free-form resume insights: ``{output: <text>}``."""
    return await run_analysis(request, AnalysisKind.TEXT)


@router.post("/analyze/score")
async def analyze_score(request: Request) -> dict[str, object]:
    """Scored resume review: ``{score, summary, strengths, improvements, skillsDetected}``."""
    return await run_analysis(request, AnalysisKind.SCORE)


@router.post("/generate-interview-prep")
async def generate_interview_prep(request: Request) -> dict[str, object]:
    """Interview preparation lists keyed by section."""
    return await run_analysis(request, AnalysisKind.INTERVIEW_PREP)


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "version": settings.app_version,
        "provider": settings.ai_provider,
    }
