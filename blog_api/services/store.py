"""Persistence store shared by the resource services."""

import logging
from collections.abc import AsyncGenerator, Iterable, Mapping
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from blog_api.models import Base
from blog_api.utils.exceptions import DatabaseError, FieldValidationError, UniqueConstraintViolation
from blog_api.utils.transaction_manager import atomic_operation

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Store:
    """CRUD primitives over one ``AsyncSession``.

    Outside ``transaction()`` every write commits on its own. Inside it,
    writes only flush, and the enclosing block commits or rolls back as a
    whole. Failures surface as ``UniqueConstraintViolation``,
    ``FieldValidationError`` or ``DatabaseError``.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self._depth = 0

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator["Store", None]:
        """Group several reads and writes into one unit of work."""
        if self._depth:
            self._depth += 1
            try:
                yield self
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            async with atomic_operation(self.db):
                yield self
        finally:
            self._depth = 0

    async def create(self, model: type[ModelT], fields: Mapping[str, Any]) -> ModelT:
        """Insert a new record and return it refreshed."""
        record = model(**fields)
        self.db.add(record)
        return await self._persist(record, self._unique_candidates(record, fields))

    async def find_by_id(
        self,
        model: type[ModelT],
        record_id: Any,
        *,
        options: Iterable[Any] = (),
        for_update: bool = False,
    ) -> ModelT | None:
        """Fetch a record by primary key, optionally locking the row."""
        stmt = select(model).where(model.id == record_id).options(*options)
        if for_update:
            stmt = stmt.with_for_update()
        stmt = stmt.execution_options(populate_existing=True)

        result = await self._execute(stmt)
        return result.scalar_one_or_none()

    async def find_one(self, model: type[ModelT], **criteria: Any) -> ModelT | None:
        """Fetch the first record matching ``criteria``."""
        result = await self._execute(select(model).filter_by(**criteria).limit(1))
        return result.scalars().first()

    async def find_all(
        self,
        model: type[ModelT],
        *,
        order_by: Any = None,
        options: Iterable[Any] = (),
        **criteria: Any,
    ) -> list[ModelT]:
        """Fetch every record matching ``criteria``."""
        stmt = select(model).filter_by(**criteria).options(*options)
        if order_by is not None:
            stmt = stmt.order_by(order_by)

        result = await self._execute(stmt)
        return list(result.scalars().all())

    async def update(self, model: type[ModelT], record_id: Any, fields: Mapping[str, Any]) -> int:
        """Apply ``fields`` to an existing record.

        Returns the number of rows changed, 0 when the record is gone.
        Assignments go through the ORM so model validators run.
        """
        record = await self.find_by_id(model, record_id, for_update=True)
        if record is None:
            return 0

        try:
            for key, value in fields.items():
                setattr(record, key, value)
        except FieldValidationError:
            await self.db.rollback()
            raise

        try:
            await self._persist(record, self._unique_candidates(record, fields))
        except StaleDataError:
            return 0
        return 1

    async def destroy(self, model: type[ModelT], record_id: Any) -> int:
        """Delete a record by primary key and return the number of rows removed."""
        result = await self._execute(delete(model).where(model.id == record_id))
        if not self.in_transaction:
            await self._commit()
        return result.rowcount

    async def _execute(self, stmt):
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Statement failed: {e}")
            raise DatabaseError(str(e)) from e

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(str(e)) from e

    async def _persist(self, record: ModelT, candidates: dict[str, Any]) -> ModelT:
        try:
            if self.in_transaction:
                await self.db.flush()
            else:
                await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise await self._classify_integrity_error(type(record), candidates, e) from e
        except StaleDataError:
            await self.db.rollback()
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Write failed: {e}")
            raise DatabaseError(str(e)) from e

        await self.db.refresh(record)
        return record

    @staticmethod
    def _unique_candidates(record: Base, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Snapshot unique column values before a write can expire them."""
        candidates = {"id": record.id}
        for column in type(record).__table__.columns:
            if column.unique and column.key in fields:
                candidates[column.key] = getattr(record, column.key)
        return candidates

    async def _classify_integrity_error(
        self, model: type[Base], candidates: dict[str, Any], error: IntegrityError
    ) -> Exception:
        """Work out which unique columns a failed write collided with."""
        record_id = candidates.pop("id", None)
        conflicts = []

        for field, value in candidates.items():
            if value is None:
                continue
            stmt = select(model.id).where(getattr(model, field) == value)
            if record_id is not None:
                stmt = stmt.where(model.id != record_id)
            result = await self._execute(stmt.limit(1))
            if result.first() is not None:
                conflicts.append(field)

        if conflicts:
            logger.info(
                "Unique constraint violated",
                extra={"model": model.__name__, "fields": conflicts},
            )
            return UniqueConstraintViolation(conflicts)

        logger.error(f"Integrity error on {model.__name__}: {error.orig}")
        return DatabaseError(str(error.orig))
