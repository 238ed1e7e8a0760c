# moviedb/db/seed.py
"""Seed sample movies into the database"""
import asyncio
import logging
from datetime import datetime

from .. import crud
from ..database import AsyncSessionLocal, init_db, close_db
from ..schemas.movie import MovieCreate
from ..services.movie_service import MovieService
from ..services.results import ValidationFailed

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MOVIES = [
    {"name": "Metropolis", "description": "A futuristic city divided between workers and planners", "genre": "Sci-Fi", "release_date": datetime(1927, 1, 10)},
    {"name": "Casablanca", "description": "A nightclub owner meets his former lover in wartime Morocco", "genre": "Drama", "release_date": datetime(1942, 11, 26)},
    {"name": "Seven Samurai", "description": "Farmers hire seven ronin to defend their village", "genre": "Action", "release_date": datetime(1954, 4, 26)},
    {"name": "Some Like It Hot", "description": "Two musicians hide from the mob in an all-female band", "genre": "Comedy", "release_date": datetime(1959, 3, 29)},
    {"name": "Alien", "description": "The crew of a space freighter meets a deadly lifeform", "genre": "Horror", "release_date": datetime(1979, 5, 25)},
]


async def seed_movies() -> int:
    """Insert sample movies that are not stored yet, return how many were added"""
    logger.info("Seeding movies...")
    added = 0

    async with AsyncSessionLocal() as db:
        service = MovieService(db)
        for movie_data in MOVIES:
            if await crud.movie.get_by_name(db, name=movie_data["name"]):
                logger.info(f"Movie '{movie_data['name']}' already exists, skipping...")
                continue

            outcome = await service.create_movie(MovieCreate(**movie_data))
            if isinstance(outcome, ValidationFailed):
                logger.error(f"Seed movie '{movie_data['name']}' is invalid: {outcome.message}")
                continue
            added += 1

    logger.info(f"✅ Movies seeded successfully! ({added} added)")
    return added


async def main() -> None:
    await init_db()
    try:
        await seed_movies()
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
