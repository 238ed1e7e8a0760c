from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from ..crud.base import CRUDBase
from ..models.movie import Movie
from ..schemas.movie import MovieCreate, MovieUpdate


class CRUDMovie(CRUDBase[Movie, MovieCreate, MovieUpdate]):
    async def get_by_name(self, db: AsyncSession, *, name: str) -> Optional[Movie]:
        try:
            result = await db.execute(select(Movie).where(Movie.name == name).limit(1))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._fail(db, "read", e) from e


movie = CRUDMovie(Movie)
