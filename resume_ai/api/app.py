"""FastAPI application factory for the resume analysis backend."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_ai.api.errors import register_error_handlers
from resume_ai.api.routes import router
from resume_ai.config.settings import Settings
from resume_ai.logging.logger import Log
from resume_ai.processor.processor import Processor, build_processor


def create_app(
    settings: Settings | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    settings = settings or Settings()
    Log.configure(settings.log_level)

    app = FastAPI(
        title="Resume AI",
        version=settings.app_version,
        description="Upload a resume and get AI-generated insights",
    )
    app.state.settings = settings
    app.state.processor = processor or build_processor(settings)

    # Browser client is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)

    Log.info(f"Resume AI backend ready (env={settings.app_env}, provider={settings.ai_provider})")
    return app
