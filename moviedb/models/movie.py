# moviedb/models/movie.py
"""Movie model - the single record kept by the service"""
from sqlalchemy import Column, Integer, String, DateTime
from ..database import Base

NAME_MAX_LENGTH = 20
DESCRIPTION_MAX_LENGTH = 500
GENRE_MAX_LENGTH = 20


class Movie(Base):
    __tablename__ = "movies"
    # AUTOINCREMENT keeps SQLite from reusing the ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False, default="")
    genre = Column(String(GENRE_MAX_LENGTH), nullable=False)
    release_date = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Movie(id={self.id}, name={self.name})>"
