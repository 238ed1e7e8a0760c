from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from moviedb import models  # noqa: F401
from moviedb.database import Base
from moviedb.schemas.movie import MovieCreate, MovieUpdate


@pytest.fixture
async def db_engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    session_factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
def movie_valid():
    return MovieCreate(
        name="Movie 1",
        description="Description 1",
        genre="Action",
        release_date=datetime(2022, 1, 1),
    )


@pytest.fixture
def movie_valid2():
    return MovieUpdate(
        name="Movie 2",
        description="Description 2",
        genre="Comedy",
        release_date=datetime(2023, 1, 1),
    )


@pytest.fixture
def movie_invalid_name():
    return MovieCreate(
        name="",
        description="New Description",
        genre="Drama",
        release_date=datetime(2023, 1, 1),
    )
