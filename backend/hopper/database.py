"""
Database connection and session management

SQLAlchemy 2.0 style. In production the URL points at PGAdapter, which
speaks the PostgreSQL wire protocol to Cloud Spanner.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from fastapi import Request

from hopper.config import Settings

# Create base class for models
Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine for the configured database"""
    return create_engine(
        settings.sqlalchemy_url,
        pool_pre_ping=True,  # Verify connection before use
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_size=5,
        max_overflow=10
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """
    Dependency for getting database session

    The session factory is built at startup and kept on ``app.state``.

    Usage in FastAPI:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """Create the Singers table if it does not exist"""
    # Import all models to register them with Base
    from hopper.models import Singer  # noqa
    Base.metadata.create_all(bind=engine)
