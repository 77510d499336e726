"""
Pytest configuration and fixtures for Newsdesk tests.
"""

import os

# Settings are read at import time, so the environment has to be ready first
os.environ.setdefault("SECRET_KEY", "test_secret_key_for_testing_only")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("DEV_MODE", "true")
os.environ.setdefault("COOKIE_SECURE", "false")

import pytest
from datetime import datetime, timedelta
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from newsdesk.core.database import Base, get_db, get_session_factory
from newsdesk.core.auth import create_access_token
from newsdesk.models.user import User
from newsdesk.models.newspaper import Newspaper
from newsdesk.models.article import Article
from newsdesk.models.news_list import NewsList
from newsdesk.services.notifier import Notifier


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_engine():
    """Create a test database engine."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Sessions on the test engine, for work outside the request session."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def test_app(db_session, session_factory):
    """Create a FastAPI test app without lifespan events or rate limiting."""
    from fastapi import FastAPI
    from newsdesk.core.errors import NewsdeskError, newsdesk_error_handler
    from newsdesk.main import include_routers

    test_app = FastAPI(title="Newsdesk - Test", version="1.0.0")
    test_app.add_exception_handler(NewsdeskError, newsdesk_error_handler)
    include_routers(test_app)

    @test_app.get("/health")
    def health():
        return {"status": "ok"}

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db
    test_app.dependency_overrides[get_session_factory] = lambda: session_factory

    return test_app


@pytest.fixture(scope="function")
def client(test_app) -> TestClient:
    """Create a test client without entering context manager."""
    return TestClient(test_app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def test_user(db_session) -> User:
    """Create a test user."""
    user = User(
        email="test@example.com", sub="test_oauth_123", name="Test User", is_active=True
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
def other_user(db_session) -> User:
    """A second user who owns nothing the test user can edit."""
    user = User(email="other@example.com", sub="other_oauth_456", name="Other User")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
def auth_headers(test_user) -> dict:
    """Create authentication headers for test requests."""
    access_token = create_access_token(data={"sub": test_user.id})
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture(scope="function")
def authenticated_client(client, test_user) -> TestClient:
    """Create an authenticated test client."""
    access_token = create_access_token(data={"sub": test_user.id})
    client.cookies.set("auth_token", access_token)
    return client


@pytest.fixture(scope="function")
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture(scope="function")
def test_newspapers(db_session) -> list[Newspaper]:
    """Create a small newspaper catalog."""
    newspapers = [
        Newspaper(name="Süddeutsche Zeitung", url="https://www.sueddeutsche.de/rss"),
        Newspaper(name="Die Zeit", url="https://newsfeed.zeit.de/index"),
        Newspaper(name="taz", url="https://taz.de/rss.xml"),
    ]
    db_session.add_all(newspapers)
    db_session.commit()
    for newspaper in newspapers:
        db_session.refresh(newspaper)
    return newspapers


@pytest.fixture(scope="function")
def test_articles(db_session, test_newspapers) -> list[Article]:
    """Articles giving the catalog some distinct authors and categories."""
    rows = [
        ("Jane Doe", "Politik"),
        ("John Roe", "Wirtschaft"),
        ("Jane Doe", "Wirtschaft"),
        (None, "Kultur"),
        ("Erika Mustermann", None),
    ]
    articles = []
    for i, (author, category) in enumerate(rows):
        article = Article(
            newspaper_id=test_newspapers[i % len(test_newspapers)].id,
            title=f"Artikel {i + 1}",
            link=f"https://example.com/artikel-{i + 1}",
            author=author,
            category=category,
        )
        db_session.add(article)
        articles.append(article)
    db_session.commit()
    return articles


@pytest.fixture(scope="function")
def test_news_list(db_session, test_user, test_newspapers) -> NewsList:
    """Create a news list owned by the test user."""
    news_list = NewsList(
        name="Morgenlage",
        newspapers=[test_newspapers[0].id, test_newspapers[1].id],
        author=test_user.id,
        filter_authors=["Jane Doe"],
        filter_categories=[],
    )
    db_session.add(news_list)
    db_session.commit()
    db_session.refresh(news_list)
    return news_list


@pytest.fixture(scope="function")
def multiple_news_lists(db_session, test_user, other_user) -> list[NewsList]:
    """Three lists with distinct creation times; the newest belongs to other_user."""
    base_time = datetime(2026, 1, 1, 8, 0, 0)
    news_lists = [
        NewsList(
            name="Älteste Liste",
            newspapers=[1],
            author=test_user.id,
            created_at=base_time,
        ),
        NewsList(
            name="Mittlere Liste",
            newspapers=[1, 2],
            author=test_user.id,
            created_at=base_time + timedelta(hours=1),
        ),
        NewsList(
            name="Fremde Liste",
            newspapers=[3],
            author=other_user.id,
            created_at=base_time + timedelta(hours=2),
        ),
    ]
    db_session.add_all(news_lists)
    db_session.commit()
    for news_list in news_lists:
        db_session.refresh(news_list)
    return news_lists
