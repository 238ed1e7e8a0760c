"""Field rules for candidate movies, checked in declaration order."""
from typing import Callable, List, Optional, Tuple

from ..models.movie import DESCRIPTION_MAX_LENGTH, GENRE_MAX_LENGTH, NAME_MAX_LENGTH
from ..schemas.movie import MovieBase

EARLIEST_RELEASE_YEAR = 1888

Rule = Tuple[Callable[[MovieBase], bool], str]


def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


# Each predicate may assume every earlier rule passed. The description rule
# stays last so it never masks a name, genre or release date message.
MOVIE_RULES: List[Rule] = [
    (lambda m: _present(m.name), "Name is required"),
    (lambda m: len(m.name) <= NAME_MAX_LENGTH,
     f"Name cannot be longer than {NAME_MAX_LENGTH} characters"),
    (lambda m: _present(m.genre), "Genre is required"),
    (lambda m: len(m.genre) <= GENRE_MAX_LENGTH,
     f"Genre cannot be longer than {GENRE_MAX_LENGTH} characters"),
    (lambda m: m.release_date is not None, "Release date is required"),
    (lambda m: m.release_date.year > EARLIEST_RELEASE_YEAR,
     f"Release date cannot be earlier than the year {EARLIEST_RELEASE_YEAR}."),
    (lambda m: len(m.description or "") <= DESCRIPTION_MAX_LENGTH, "Description is too long"),
]


def validate_movie(movie: MovieBase, rules: List[Rule] = MOVIE_RULES) -> Optional[str]:
    """Return the message of the first rule the movie breaks, or None if it is valid."""
    for predicate, message in rules:
        if not predicate(movie):
            return message
    return None
