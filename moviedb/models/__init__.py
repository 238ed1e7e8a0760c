from ..database import Base
from .movie import Movie

# This ensures all models are registered with Base.metadata
__all__ = ["Base", "Movie"]
