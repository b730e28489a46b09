"""Shared fixtures: in-memory database and an async API client bound to it."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from lectureqa.db import get_db
from lectureqa.main import app
from lectureqa.models import Base, Course, Faculty, User, UserRole

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

STUDENT_ID = "student-1"
OTHER_STUDENT_ID = "student-2"
TEACHER_ID = "teacher-1"


@pytest.fixture
async def db_engine():
    """Create an async SQLite engine with the full schema and enforced FKs."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for direct repository tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def api_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async client whose requests use the in-memory database."""

    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def seeded(session_factory) -> dict[str, int]:
    """Seed a faculty, two courses, two students and a teacher."""
    async with session_factory() as session:
        faculty = Faculty(name="Science")
        session.add(faculty)
        await session.flush()

        calculus = Course(name="Calculus I", faculty_id=faculty.id)
        physics = Course(name="Physics", faculty_id=faculty.id)
        session.add_all([calculus, physics])

        session.add_all(
            [
                User(id=STUDENT_ID, faculty_id=faculty.id, role=UserRole.STUDENT),
                User(id=OTHER_STUDENT_ID, faculty_id=faculty.id, role=UserRole.STUDENT),
                User(id=TEACHER_ID, faculty_id=faculty.id, role=UserRole.TEACHER),
            ]
        )
        await session.commit()

        return {
            "faculty_id": faculty.id,
            "calculus_id": calculus.id,
            "physics_id": physics.id,
        }


def auth(user_id: str) -> dict[str, str]:
    """Headers identifying the caller."""
    return {"X-User-Id": user_id}
