"""Database Session Manager — async connection pool, transactions and error translation.

Invariants:
    - One engine per process: created by init_db on startup, disposed by close_db
      on shutdown; request code reaches it only through get_db
    - Every session auto-rolls-back on exception (no partial commits leak)
    - transaction() commits once at the end or rolls back everything
    - translate_db_errors() turns stray SQLAlchemy errors into PersistenceFaultError;
      domain errors pass through untouched
    - SQLite connections get PRAGMA foreign_keys=ON so FK cascades behave as on PostgreSQL

Design Decisions:
    - Module-level db_manager initialized in the FastAPI lifespan
      (ADR: no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Gateway calls only flush; the handler owns the transaction boundary
"""

import logging
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncGenerator, Awaitable, Callable, Iterator

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from blogcart.core.errors import PersistenceFaultError

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on FK enforcement for every new SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        if database_url.startswith("sqlite"):
            self.engine = create_async_engine(database_url, echo=echo)
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_async_engine(
                database_url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Unhandled database error: {e}")
            raise PersistenceFaultError("complete database operation") from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Release every pooled connection."""
        await self.engine.dispose()


# Initialized on startup, released on shutdown
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is None:
        return
    await db_manager.close()
    db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


# ─── Transactions ───────────────────────────────────────────────

@asynccontextmanager
async def transaction(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """Interactive transaction: commit on success, roll back on any exception."""
    try:
        yield db
        await db.commit()
    except BaseException:
        await db.rollback()
        raise


async def run_batch(
    db: AsyncSession, *operations: Callable[[], Awaitable[Any]],
) -> list[Any]:
    """Run independent operations in one transaction; results in call order."""
    results: list[Any] = []
    async with transaction(db):
        for operation in operations:
            results.append(await operation())
    return results


@contextmanager
def translate_db_errors(operation: str, expose_detail: bool = False) -> Iterator[None]:
    """Map unexpected SQLAlchemy errors to a PersistenceFaultError for `operation`."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to {operation}: {e}",
            extra={"operation": operation},
            exc_info=True,
        )
        detail = str(e.orig if getattr(e, "orig", None) is not None else e)
        raise PersistenceFaultError(
            operation, detail if expose_detail else None,
        ) from e
