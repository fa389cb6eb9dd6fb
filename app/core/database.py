from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)

# Created by get_engine() on first use so importing this module never connects.
_engine: Engine | None = None


def build_engine(url: str, echo: bool = False) -> Engine:
    if url.startswith("sqlite"):
        # One shared connection so in-memory databases survive across sessions
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        url,
        echo=echo,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using them
        pool_recycle=3600,  # Recycle connections after 1 hour
    )


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = build_engine(settings.database_url, echo=settings.DEBUG)
    return _engine


def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def create_database():
    settings = get_settings()
    temp_engine = create_engine(settings.database_url_without_db)
    try:
        with temp_engine.connect() as conn:
            _ = conn.execute(text(f"CREATE DATABASE IF NOT EXISTS {settings.DB_NAME}"))
            conn.commit()
            logger.info(f"Database '{settings.DB_NAME}' ready")
    except Exception as e:
        logger.error(f"Failed to create database: {e}")
        raise
    finally:
        temp_engine.dispose()


def create_db_and_tables(*models):
    """
    Create database and tables for given models.

    The MySQL database itself is created only when DATABASE_URL is not
    overridden; any other backend is expected to exist already.

    Args:
        *models: SQLModel classes to create tables for
    """
    settings = get_settings()
    if settings.DATABASE_URL is None:
        create_database()
    engine = get_engine()
    if models:
        # Create tables for specific models
        for model in models:
            model.__table__.create(engine, checkfirst=True)
        logger.info(f"Database tables created for {len(models)} model(s)")
    else:
        # Fallback: create all registered models
        SQLModel.metadata.create_all(engine)
        logger.info("Database tables created successfully")


def get_session():
    with Session(get_engine()) as session:
        yield session
