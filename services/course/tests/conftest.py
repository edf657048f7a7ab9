from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401 - register with Base
from app.progress.repository import SqlAlchemyProgressRepository
from factories import (
    OTHER_USER_ID,
    USER_ID,
    CountingRepository,
    challenge,
    course,
    lesson,
    progress,
    seed,
    unit,
    user_progress,
)
from shared.database.postgres import Base, get_async_engine

# One shared in-memory database per engine; StaticPool keeps the single connection alive.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = get_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session: AsyncSession) -> CountingRepository:
    return CountingRepository(SqlAlchemyProgressRepository(db_session))


@pytest_asyncio.fixture
async def spanish_course(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Course 7 for USER_ID.

    Unit 1 (order 1): lesson 101 (order 1, challenge 1001 done, 1002 untouched)
                      lesson 102 (order 2, challenges 1003 and 1004 done)
    Unit 2 (order 2): lesson 201 (order 1, no challenges)
                      lesson 202 (order 2, challenge 2001 with a failed retry)

    OTHER_USER_ID has finished everything in lesson 101; those rows must
    never leak into USER_ID's views.
    """
    await seed(
        session_factory,
        course(7, "Spanish"),
        course(8, "French"),
        # Inserted out of order: ordering has to come from sort_order.
        unit(2, 7, sort_order=2),
        unit(1, 7, sort_order=1),
        unit(3, 8, sort_order=1),
        lesson(102, 1, sort_order=2),
        lesson(101, 1, sort_order=1),
        lesson(202, 2, sort_order=2),
        lesson(201, 2, sort_order=1),
        challenge(1002, 101, sort_order=2),
        challenge(1001, 101, sort_order=1),
        challenge(1003, 102, sort_order=1),
        challenge(1004, 102, sort_order=2),
        challenge(2001, 202, sort_order=1),
        progress(1001, USER_ID, completed=True),
        progress(1003, USER_ID, completed=True),
        progress(1004, USER_ID, completed=True),
        progress(2001, USER_ID, completed=True),
        progress(2001, USER_ID, completed=False),
        progress(1001, OTHER_USER_ID, completed=True),
        progress(1002, OTHER_USER_ID, completed=True),
        user_progress(USER_ID, active_course_id=7),
        user_progress(OTHER_USER_ID, active_course_id=7),
    )
