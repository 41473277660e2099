"""Data Store Gateway — typed CRUD, bulk operations and bounded includes over one entity.

Invariants:
    - Gateway calls flush but never commit: the caller owns the transaction
    - Unique/FK violations surface at the call site as ConstraintViolationError
    - find_unique_or_throw / update_one / delete_one raise ResourceNotFoundError
      ("<Resource> not found") when the id is absent
    - update_many / delete_many touch exactly the rows whose id matches;
      missing ids are skipped and count is the number of matched rows
    - where filters only on indexed columns (primary key, unique, index=True);
      a list/tuple/set value means IN, anything else means equality
    - include paths are explicit dotted relationship names, at most
      MAX_INCLUDE_DEPTH hops, eagerly loaded with selectinload (no N+1)

Design Decisions:
    - One generic class instead of a repository per entity: every entity needs
      the same eight operations (ADR: DRY over per-entity boilerplate)
    - Relationships are lazy="raise" on the models, so a missing include fails
      loudly instead of issuing hidden queries
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, inspect, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blogcart.core.domain_types import MAX_INCLUDE_DEPTH
from blogcart.core.errors import ConstraintViolationError, ResourceNotFoundError
from blogcart.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

_SET_TYPES = (list, tuple, set, frozenset)


class EntityGateway(Generic[ModelT]):
    """CRUD gateway bound to one session and one ORM model."""

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model
        self.resource: str = getattr(model, "__resource__", model.__name__)

    # ─── Query building ─────────────────────────────────────────

    def _filter_column(self, name: str):
        columns = inspect(self.model).columns
        if name not in columns:
            raise ValueError(f"{self.model.__name__} has no column '{name}'")
        column = columns[name]
        if not (column.primary_key or column.index or column.unique):
            raise ValueError(
                f"{self.model.__name__}.{name} is not indexed and cannot be filtered on",
            )
        return column

    def _conditions(self, where: Mapping[str, Any] | None) -> list:
        conditions = []
        for name, value in (where or {}).items():
            column = self._filter_column(name)
            if isinstance(value, _SET_TYPES):
                conditions.append(column.in_(list(value)))
            else:
                conditions.append(column == value)
        return conditions

    def _load_options(self, include: Iterable[str]) -> list:
        options = []
        for path in include:
            segments = path.split(".")
            if len(segments) > MAX_INCLUDE_DEPTH:
                raise ValueError(
                    f"Include '{path}' exceeds depth {MAX_INCLUDE_DEPTH}",
                )
            current = self.model
            loader = None
            for segment in segments:
                relationship = inspect(current).relationships.get(segment)
                if relationship is None:
                    raise ValueError(
                        f"{current.__name__} has no relationship '{segment}'",
                    )
                attribute = getattr(current, segment)
                loader = (
                    selectinload(attribute) if loader is None
                    else loader.selectinload(attribute)
                )
                current = relationship.mapper.class_
            options.append(loader)
        return options

    async def _flush(self, conflict_message: str | None = None) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning(
                f"{self.resource} constraint violated: {e.orig}",
                extra={"resource": self.resource},
            )
            raise ConstraintViolationError(self.resource, conflict_message) from e

    # ─── Create ─────────────────────────────────────────────────

    async def create_one(
        self, fields: Mapping[str, Any], conflict_message: str | None = None,
    ) -> ModelT:
        """Insert one row. ConstraintViolationError on unique/FK violation."""
        record = self.model(**fields)
        self.db.add(record)
        await self._flush(conflict_message)
        return record

    async def create_many(
        self,
        items: Sequence[Mapping[str, Any]],
        conflict_message: str | None = None,
    ) -> dict[str, int]:
        """Insert all rows in one flush. One failure rejects the whole batch."""
        records = [self.model(**fields) for fields in items]
        self.db.add_all(records)
        await self._flush(conflict_message)
        return {"count": len(records)}

    # ─── Read ───────────────────────────────────────────────────

    async def find_many(
        self,
        where: Mapping[str, Any] | None = None,
        include: Iterable[str] = (),
        skip: int | None = None,
        take: int | None = None,
    ) -> list[ModelT]:
        """Rows matching `where`, ordered by id, with relations in `include` loaded."""
        options = self._load_options(include)
        query = (
            select(self.model)
            .where(*self._conditions(where))
            .options(*options)
            .order_by(self.model.id)
        )
        if options:
            query = query.execution_options(populate_existing=True)
        if skip:
            query = query.offset(skip)
        if take is not None:
            query = query.limit(take)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def find_first(
        self, where: Mapping[str, Any], include: Iterable[str] = (),
    ) -> ModelT | None:
        rows = await self.find_many(where, include, take=1)
        return rows[0] if rows else None

    async def find_unique(
        self, record_id: int, include: Iterable[str] = (),
    ) -> ModelT | None:
        return await self.find_first({"id": record_id}, include)

    async def find_unique_or_throw(
        self, record_id: int, include: Iterable[str] = (),
    ) -> ModelT:
        """Like find_unique, but a missing row is a ResourceNotFoundError."""
        record = await self.find_unique(record_id, include)
        if record is None:
            raise ResourceNotFoundError(self.resource, record_id)
        return record

    async def count(self, where: Mapping[str, Any] | None = None) -> int:
        query = (
            select(func.count())
            .select_from(self.model)
            .where(*self._conditions(where))
        )
        result = await self.db.execute(query)
        return int(result.scalar_one())

    # ─── Update ─────────────────────────────────────────────────

    async def update_one(
        self, record_id: int, fields: Mapping[str, Any],
    ) -> ModelT:
        """Merge `fields` into one row."""
        record = await self.find_unique_or_throw(record_id)
        for name, value in fields.items():
            setattr(record, name, value)
        await self._flush()
        return record

    async def update_many(
        self, record_ids: Sequence[int], fields: Mapping[str, Any],
    ) -> dict[str, int]:
        """Apply the same merge to every row whose id is in `record_ids`."""
        if not record_ids:
            return {"count": 0}
        if not fields:
            return {"count": await self.count({"id": list(record_ids)})}
        statement = (
            update(self.model)
            .where(self.model.id.in_(list(record_ids)))
            .values(**fields)
            .execution_options(synchronize_session="evaluate")
        )
        try:
            result = await self.db.execute(statement)
        except IntegrityError as e:
            raise ConstraintViolationError(self.resource) from e
        return {"count": result.rowcount}

    # ─── Delete ─────────────────────────────────────────────────

    async def delete_one(self, record_id: int) -> ModelT:
        """Delete one row (ORM cascades apply) and return it as it was."""
        record = await self.find_unique_or_throw(record_id)
        await self.db.delete(record)
        await self._flush()
        return record

    async def delete_many(self, record_ids: Sequence[int]) -> dict[str, int]:
        """Delete every row whose id is in `record_ids`."""
        if not record_ids:
            return {"count": 0}
        statement = (
            delete(self.model)
            .where(self.model.id.in_(list(record_ids)))
            .execution_options(synchronize_session="evaluate")
        )
        try:
            result = await self.db.execute(statement)
        except IntegrityError as e:
            raise ConstraintViolationError(self.resource) from e
        return {"count": result.rowcount}
