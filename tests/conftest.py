"""Shared fixtures: a mocked entity store, a mocked service, and the app."""

import datetime
import os
import tempfile
from unittest.mock import AsyncMock

import pytest

# Point the engine at a throwaway database before post_api is imported
_db_dir = tempfile.TemporaryDirectory(prefix='post-api-tests-')
os.environ['DATABASE_URL'] = f"sqlite+aiosqlite:///{os.path.join(_db_dir.name, 'posts.db')}"

from fastapi.testclient import TestClient  # noqa: E402

from post_api.app import app  # noqa: E402
from post_api.db import Post  # noqa: E402
from post_api.repository import PostRepository, get_post_repository  # noqa: E402
from post_api.service import PostService, get_post_service  # noqa: E402

CREATED = datetime.datetime(2023, 5, 14, 0, 0)


@pytest.fixture
def post():
    return Post(id=1, title='Title', content='Content', created_at=CREATED)


@pytest.fixture
def store():
    return AsyncMock(spec=PostRepository)


@pytest.fixture
def service():
    return AsyncMock(spec=PostService)


@pytest.fixture
def store_client(store):
    app.dependency_overrides[get_post_repository] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def service_client(service):
    app.dependency_overrides[get_post_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope='session', autouse=True)
def database_dir():
    yield _db_dir.name
    _db_dir.cleanup()
