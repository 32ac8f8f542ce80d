"""Transaction management utilities."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class TransactionManager:
    """Context manager that commits on success and rolls back on error."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.db.commit()
                logger.debug("Transaction committed")
            else:
                await self.db.rollback()
                logger.warning(f"Transaction rolled back due to {exc_type.__name__}: {exc_val}")
        except Exception as e:
            logger.error(f"Error during transaction cleanup: {e}")
            await self.db.rollback()
            if exc_type is None:
                raise

        return False  # Don't suppress exceptions


@asynccontextmanager
async def atomic_operation(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """
    Run a block of store work as one unit.

    Usage:
        async with atomic_operation(db) as session:
            post = await session.get(Post, post_id, with_for_update=True)
            await session.delete(post)
    """
    async with TransactionManager(db):
        yield db
