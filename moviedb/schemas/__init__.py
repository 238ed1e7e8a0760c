from .movie import Movie, MovieCreate, MovieUpdate

__all__ = ["Movie", "MovieCreate", "MovieUpdate"]
