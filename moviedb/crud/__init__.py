from .movie import movie

__all__ = ["movie"]
