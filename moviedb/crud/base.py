from typing import Any, Generic, List, Optional, Type, TypeVar
import logging

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base
from ..exceptions import StorageFault

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

# Integer primary keys are signed 64-bit in every supported backend
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Async record store over a single SQLAlchemy model.

    Every SQLAlchemy error is rolled back and re-raised as StorageFault.
    Nothing is retried.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def _fail(self, db: AsyncSession, action: str, exc: SQLAlchemyError) -> StorageFault:
        await db.rollback()
        logger.error(f"❌ Failed to {action} {self.model.__tablename__}: {exc}", exc_info=True)
        return StorageFault(f"Failed to {action} {self.model.__tablename__}", original=exc)

    def _values(self, obj_in: BaseModel) -> dict:
        columns = {col.name for col in self.model.__table__.columns}
        return {
            key: value
            for key, value in obj_in.model_dump(by_alias=False).items()
            if key in columns and key != "id"
        }

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        if isinstance(id, int) and not MIN_ID <= id <= MAX_ID:
            return None
        try:
            return await db.get(self.model, id)
        except SQLAlchemyError as e:
            raise await self._fail(db, "read", e) from e

    async def list_all(self, db: AsyncSession) -> List[ModelType]:
        try:
            result = await db.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._fail(db, "list", e) from e

    async def count(self, db: AsyncSession) -> int:
        try:
            result = await db.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()
        except SQLAlchemyError as e:
            raise await self._fail(db, "count", e) from e

    async def insert(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**self._values(obj_in))
        try:
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
        except SQLAlchemyError as e:
            raise await self._fail(db, "insert into", e) from e
        return db_obj

    async def replace(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: UpdateSchemaType
    ) -> ModelType:
        for field, value in self._values(obj_in).items():
            setattr(db_obj, field, value)
        try:
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
        except SQLAlchemyError as e:
            raise await self._fail(db, "update", e) from e
        return db_obj

    async def remove(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        db_obj = await self.get(db, id)
        if db_obj is None:
            return None
        try:
            await db.delete(db_obj)
            await db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(db, "delete from", e) from e
        return db_obj
