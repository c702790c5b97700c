from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from resume_ai.api.app import create_app
from resume_ai.config.settings import Settings


@pytest.fixture()
def app_client(example_settings: Settings) -> Generator[TestClient, None, None]:
    """Backend wired end to end against the offline example provider."""
    app = create_app(example_settings)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
