from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


# Field constraints are enforced by services.validation so that failures
# carry their own message and map to 400 rather than 422.
class MovieBase(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = ""
    genre: Optional[str] = None
    release_date: Optional[datetime] = Field(None, alias="releaseDate")

    class Config:
        populate_by_name = True


class MovieCreate(MovieBase):
    pass


class MovieUpdate(MovieBase):
    """Full replacement of every mutable field."""
    pass


class Movie(MovieBase):
    id: int

    class Config:
        from_attributes = True
