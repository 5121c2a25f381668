"""
Pytest Configuration and Fixtures

Provides test database setup and common fixtures.
"""
import pytest
from datetime import datetime, timedelta, timezone
from uuid import uuid4
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use SQLite in-memory for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Setup test database schema once for all tests."""
    from hopper.models import Singer  # noqa
    from hopper.database import Base

    Base.metadata.create_all(bind=test_engine)

    yield

    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def db_session(setup_test_database):
    """Create a fresh database session for each test."""
    connection = test_engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    # A store rollback may already have ended the outer transaction
    if transaction.is_active:
        transaction.rollback()
    connection.close()


@pytest.fixture
def store(db_session):
    """SingersStore using the local clock for commit timestamps."""
    from hopper.services.singers_store import SingersStore

    return SingersStore(db_session, commit_timestamp_source="client")


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    from contextlib import asynccontextmanager
    from hopper.config import Settings
    from hopper.database import get_db
    from hopper.main import create_app

    app = create_app(Settings(commit_timestamp="client"))

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    @asynccontextmanager
    async def test_lifespan(app):
        # Skip engine creation in tests
        yield

    app.router.lifespan_context = test_lifespan
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_singer(db_session):
    """Insert a singer row created ``days_old`` days ago."""
    from hopper.models import Singer

    def _make_singer(days_old: float = 0, first_name: str = "Eleanor", last_name: str = "Ford"):
        ts = datetime.now(timezone.utc) - timedelta(days=days_old)
        singer = Singer(
            singer_id=str(uuid4()),
            first_name=first_name,
            last_name=last_name,
            created_at=ts,
            updated_at=ts,
        )
        db_session.add(singer)
        db_session.commit()
        db_session.refresh(singer)
        return singer

    return _make_singer


@pytest.fixture
def count_singers(db_session):
    """Count rows in the Singers table."""
    from sqlalchemy import func, select
    from hopper.models import Singer

    def _count() -> int:
        return db_session.execute(select(func.count(Singer.singer_id))).scalar() or 0

    return _count
