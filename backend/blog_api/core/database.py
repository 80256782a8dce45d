from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from blog_api.core.config import settings


def build_engine(database_url: str):
    """Create an engine; SQLite connections are shared across request threads"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


# Create database engine - manages connection pool
engine = build_engine(settings.DATABASE_URL)

# Session factory - each request gets a new session
# autocommit=False: Changes require explicit commit
# autoflush=False: Don't auto-flush before queries
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all database models
Base = declarative_base()


def get_db():
    """
    Dependency for getting database session.

    The session is closed after the request completes, even if the
    handler raised.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
