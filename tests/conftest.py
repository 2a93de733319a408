"""Pytest configuration and shared fixtures."""
import os

# Cheap bcrypt and a throwaway database for anything that reads settings at import.
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import itertools  # noqa: E402
from collections.abc import Callable, Generator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from quizmaker.db.base import Base  # noqa: E402
from quizmaker.db.session import enable_sqlite_foreign_keys  # noqa: E402
from quizmaker.schemas.user import UserCreateSchema, UserSchema  # noqa: E402
from quizmaker.services.users import create_user  # noqa: E402
from tests.helpers import TEST_PASSWORD  # noqa: E402


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory SQLite database with foreign keys on, one per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db) -> Callable[..., UserSchema]:
    counter = itertools.count(1)

    def _make_user(username: str | None = None, email: str | None = None, password: str = TEST_PASSWORD) -> UserSchema:
        n = next(counter)
        return create_user(
            db,
            UserCreateSchema(
                first_name="Test",
                last_name=f"User{n}",
                username=username or f"user_{n}",
                email=email or f"user_{n}@example.com",
                password=password,
            ),
        )

    return _make_user


@pytest.fixture
def user(make_user) -> UserSchema:
    return make_user(username="JohnDoe", email="John.Doe@Example.com")


@pytest.fixture
def other_user(make_user) -> UserSchema:
    return make_user(username="janedoe", email="jane@example.com")
