"""
Tagged outcomes returned by the movie service.

Callers branch on the outcome type instead of catching exceptions; ``unwrap``
turns an outcome back into a value or the matching exception.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ..exceptions import NotFoundError, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T = None

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class ValidationFailed:
    message: str

    def unwrap(self):
        raise ValidationError(self.message)


@dataclass(frozen=True)
class NotFound:
    message: str = "Movie not found"

    def unwrap(self):
        raise NotFoundError(self.message)


Outcome = Union[Success[T], ValidationFailed, NotFound]
