import argparse
import mimetypes
from pathlib import Path

from resume_ai.analysis.models import InterviewPrep
from resume_ai.client.api_client import BackendClient
from resume_ai.client.exceptions import ClientError
from resume_ai.client.rendering import PREP_SECTIONS, render, render_interview_prep
from resume_ai.client.session import PDF_ONLY, RESUME_DOCUMENTS, AnalysisSession
from resume_ai.config.settings import Settings
from resume_ai.logging.logger import Log
from resume_ai.processor.models import AnalysisKind
from resume_ai.uploads.media_types import EXTENSIONS

COMMANDS: dict[str, AnalysisKind] = {
    "analyze": AnalysisKind.TEXT,
    "score": AnalysisKind.SCORE,
    "prep": AnalysisKind.INTERVIEW_PREP,
}


def declared_mime_type(path: Path) -> str:
    """Guess the media type from the file extension, the way a browser declares it."""
    suffix = path.suffix.lower()
    for mime_type, extension in EXTENSIONS.items():
        if extension == suffix:
            return mime_type
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def build_parser() -> argparse.ArgumentParser:
    backend_help = "Backend base URL (default: BACKEND_URL setting)"
    # Accepted after the subcommand too; SUPPRESS keeps a value given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--backend-url", default=argparse.SUPPRESS, help=backend_help)

    parser = argparse.ArgumentParser(
        prog="resume-ai",
        description="Upload a resume to the Resume AI backend and print the analysis.",
    )
    parser.add_argument("--backend-url", help=backend_help)
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("analyze", "Free-form resume insights"),
        ("score", "Scored review with strengths and improvements"),
        ("prep", "Interview preparation questions"),
    ):
        cmd = sub.add_parser(name, help=help_text, parents=[common])
        cmd.add_argument("file", type=Path, help="Resume file to upload")
        cmd.add_argument("--mime-type", help="Override the declared media type")
        if name == "analyze":
            cmd.add_argument(
                "--allow-word",
                action="store_true",
                help="Also accept .doc and .docx files",
            )
        if name == "prep":
            cmd.add_argument(
                "--section",
                choices=[key for key, _ in PREP_SECTIONS],
                help="Only print one section",
            )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    kind = COMMANDS[args.command]
    allowed = RESUME_DOCUMENTS if getattr(args, "allow_word", False) else PDF_ONLY
    path: Path = args.file
    if not path.is_file():
        print(f"File not found: {path}")
        return 2

    with BackendClient(
        args.backend_url or settings.backend_url,
        timeout_seconds=settings.client_timeout_seconds,
    ) as backend:
        session = AnalysisSession(backend, kind=kind, allowed_mime_types=allowed)
        try:
            session.select_file(
                path.read_bytes(),
                path.name,
                args.mime_type or declared_mime_type(path),
            )
        except ClientError as exc:
            print(exc)
            return 2

        result = session.submit()

    if result is None:
        print(session.error)
        return 1
    section = getattr(args, "section", None)
    if isinstance(result, InterviewPrep) and section:
        print(render_interview_prep(result, section))
    else:
        print(render(result))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
