from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import get_db
from app.main import create_app
from factories import USER_ID
from shared.auth.config import AuthSettings
from shared.auth.dependencies import get_auth_settings

TEST_AUTH = AuthSettings(
    secret="test-secret",
    algorithm="HS256",
    issuer="test-identity",
    audience="test-services",
)


def _token(sub: str, secret: str = TEST_AUTH.secret) -> str:
    return jwt.encode(
        {"sub": sub, "iss": TEST_AUTH.issuer, "aud": TEST_AUTH.audience},
        secret,
        algorithm=TEST_AUTH.algorithm,
    )


def _auth(sub: str = USER_ID) -> dict[str, str]:
    return {"Authorization": f"Bearer {_token(sub)}"}


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession]) -> FastAPI:
    app = create_app()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_settings] = lambda: TEST_AUTH
    return app


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    assert response.status_code == 200
    assert response.json()["service"] == "course-progress"


@pytest.mark.asyncio
async def test_anonymous_requests_get_empty_bodies(async_client: AsyncClient, spanish_course) -> None:
    assert (await async_client.get("/api/v1/progress/me")).json() is None
    assert (await async_client.get("/api/v1/progress/units")).json() == []
    assert (await async_client.get("/api/v1/progress/course")).json() is None
    assert (await async_client.get("/api/v1/lessons/active")).json() is None
    assert (await async_client.get("/api/v1/progress/lesson-percentage")).json() == {"percentage": 0}


@pytest.mark.asyncio
async def test_invalid_token_is_treated_as_anonymous(async_client: AsyncClient, spanish_course) -> None:
    headers = {"Authorization": f"Bearer {_token(USER_ID, secret='wrong-secret')}"}

    response = await async_client.get("/api/v1/progress/me", headers=headers)

    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_progress_me(async_client: AsyncClient, spanish_course) -> None:
    response = await async_client.get("/api/v1/progress/me", headers=_auth())

    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == USER_ID
    assert body["active_course"]["course_id"] == 7


@pytest.mark.asyncio
async def test_units_with_completion(async_client: AsyncClient, spanish_course) -> None:
    response = await async_client.get("/api/v1/progress/units", headers=_auth())

    assert response.status_code == 200
    lessons = [lesson for unit in response.json() for lesson in unit["lessons"]]
    assert [(lesson["lesson_id"], lesson["completed"]) for lesson in lessons] == [
        (101, False),
        (102, True),
        (201, False),
        (202, False),
    ]


@pytest.mark.asyncio
async def test_course_progress_and_percentage(async_client: AsyncClient, spanish_course) -> None:
    progress = await async_client.get("/api/v1/progress/course", headers=_auth())
    percentage = await async_client.get("/api/v1/progress/lesson-percentage", headers=_auth())

    assert progress.json()["active_lesson_id"] == 101
    assert percentage.json() == {"percentage": 50}


@pytest.mark.asyncio
async def test_active_and_explicit_lesson(async_client: AsyncClient, spanish_course) -> None:
    active = await async_client.get("/api/v1/lessons/active", headers=_auth())
    explicit = await async_client.get("/api/v1/lessons/102", headers=_auth())

    assert active.json()["lesson_id"] == 101
    assert [c["completed"] for c in explicit.json()["challenges"]] == [True, True]


@pytest.mark.asyncio
async def test_course_catalog(async_client: AsyncClient, spanish_course) -> None:
    listing = await async_client.get("/api/v1/courses")
    detail = await async_client.get("/api/v1/courses/7")

    assert [c["course_id"] for c in listing.json()] == [7, 8]
    assert [u["unit_id"] for u in detail.json()["units"]] == [1, 2]


@pytest.mark.asyncio
async def test_unknown_course_is_404_envelope(async_client: AsyncClient, spanish_course) -> None:
    response = await async_client.get("/api/v1/courses/999", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 404
    body = response.json()
    assert body["error"]["message"] == "Course not found: 999"
    assert body["request_id"] == "req-123"
    assert response.headers["X-Request-ID"] == "req-123"
