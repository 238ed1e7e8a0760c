# moviedb/api/deps.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from ..database import get_async_db
from ..services.movie_service import MovieService


def get_movie_service(db: AsyncSession = Depends(get_async_db)) -> MovieService:
    """Movie service bound to the request's database session."""
    return MovieService(db)
