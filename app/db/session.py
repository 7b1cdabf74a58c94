"""
Database session and engine configuration.

This file sets up the async database connection using SQLAlchemy.
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from typing import AsyncGenerator

from app.core.config import settings


def _connect_args(url: str) -> dict:
    # aiosqlite connections are shared across the event loop's worker thread
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# Create the async database engine
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # When DEBUG=True, prints SQL queries to console
    future=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)

# Create a session factory
# Sessions are used to interact with the database (read, write, update, delete)
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Keeps data accessible after commit
)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database session.
    
    This is used by FastAPI to provide a database connection to your API endpoints.
    The session is automatically closed when the request is done.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
