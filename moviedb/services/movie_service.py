"""
Movie service
Create, read, update and delete movie records with validation
"""

import logging
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from .. import crud
from ..models.movie import Movie
from ..schemas.movie import MovieBase, MovieCreate, MovieUpdate
from .results import NotFound, Outcome, Success, ValidationFailed
from .validation import validate_movie

logger = logging.getLogger(__name__)


class MovieService:
    """
    Orchestrates validation and the movie record store.

    Validation always runs before any write, so a rejected candidate leaves
    the store untouched. Update and delete read the row once before writing;
    that read and write are not isolated from concurrent requests, the last
    write wins. StorageFault from the store propagates unchanged.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _normalize(candidate: MovieBase) -> MovieBase:
        return candidate.model_copy(update={"description": candidate.description or ""})

    async def list_movies(self) -> List[Movie]:
        """All movies in insertion order"""
        return await crud.movie.list_all(self.db)

    async def get_movie(self, movie_id: int) -> Optional[Movie]:
        """The movie with this id, or None when absent"""
        return await crud.movie.get(self.db, movie_id)

    async def create_movie(self, movie_in: MovieCreate) -> Union[Success[Movie], ValidationFailed]:
        error = validate_movie(movie_in)
        if error:
            logger.warning(f"⚠️ Rejected new movie: {error}")
            return ValidationFailed(error)

        movie = await crud.movie.insert(self.db, obj_in=self._normalize(movie_in))
        logger.info(f"✅ Movie created: {movie.name} (id={movie.id})")
        return Success(movie)

    async def update_movie(
        self, movie_id: int, movie_in: MovieUpdate
    ) -> Outcome[None]:
        """Replace all mutable fields of an existing movie"""
        movie = await crud.movie.get(self.db, movie_id)
        if movie is None:
            logger.warning(f"⚠️ Update of unknown movie {movie_id}")
            return NotFound()

        error = validate_movie(movie_in)
        if error:
            logger.warning(f"⚠️ Rejected update of movie {movie_id}: {error}")
            return ValidationFailed(error)

        await crud.movie.replace(self.db, db_obj=movie, obj_in=self._normalize(movie_in))
        logger.info(f"✅ Movie updated: {movie.name} (id={movie_id})")
        return Success()

    async def delete_movie(self, movie_id: int) -> Union[Success[None], NotFound]:
        movie = await crud.movie.get(self.db, movie_id)
        if movie is None:
            logger.warning(f"⚠️ Delete of unknown movie {movie_id}")
            return NotFound()

        await crud.movie.remove(self.db, id=movie_id)
        logger.info(f"🗑️ Movie deleted: {movie.name} (id={movie_id})")
        return Success()
