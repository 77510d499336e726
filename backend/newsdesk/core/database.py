from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from newsdesk.core.config import settings

connect_args = {}
if settings.database_url.startswith("sqlite"):
    # SQLite connections are shared with the request threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.database_url, connect_args=connect_args, pool_pre_ping=True
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a session per request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory():
    """Session factory for work that runs outside the request's own session."""
    return SessionLocal
