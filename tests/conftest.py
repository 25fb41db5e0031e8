"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base, get_db
from src.main import app
from src.models.user import User
from src.repositories import FridgeRepository, GroceryRepository, PantryRepository, RecipeRepository
from src.services.auth import create_access_token
from src.services.fridge_service import FridgeService
from src.services.grocery_service import GroceryService
from src.services.pantry_service import PantryService
from src.services.recipe_service import RecipeService
from src.services.sync_service import GrocerySyncService


class AuthHeaders(dict):
    """Dict subclass that also stores user_id."""

    def __init__(self, *args, user_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/kitchen", "/kitchen_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, email: str) -> User:
    """Insert a user row; authentication itself happens upstream."""
    user = User(email=email, name=email.split("@")[0], password_hash="upstream")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user(db):
    """The primary test user."""
    return make_user(db, "test@example.com")


@pytest.fixture
def other_user(db):
    """A second household member whose data must stay invisible."""
    return make_user(db, "other@example.com")


@pytest.fixture
def auth_headers(user):
    """Bearer headers for the primary test user."""
    return AuthHeaders(
        {"Authorization": f"Bearer {create_access_token(user.id)}"}, user_id=user.id
    )


@pytest.fixture
def other_auth_headers(other_user):
    """Bearer headers for the second test user."""
    return AuthHeaders(
        {"Authorization": f"Bearer {create_access_token(other_user.id)}"}, user_id=other_user.id
    )


@pytest.fixture
def pantry_service(db):
    return PantryService(PantryRepository(db))


@pytest.fixture
def fridge_service(db, pantry_service):
    return FridgeService(pantry_service, FridgeRepository(db))


@pytest.fixture
def grocery_service(db, pantry_service, fridge_service):
    return GroceryService(pantry_service, GroceryRepository(db), GrocerySyncService(fridge_service))


@pytest.fixture
def recipe_service(db, pantry_service, grocery_service):
    return RecipeService(pantry_service, RecipeRepository(db), grocery_service, FridgeRepository(db))


@pytest.fixture
def session_factory():
    """Sessionmaker bound to the test database, for tests needing their own connections."""
    return TestingSessionLocal
