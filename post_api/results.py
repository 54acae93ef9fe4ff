"""Outcome values passed from the service up to the HTTP boundary.

Service calls return ``Ok`` or a failure value instead of raising; the
HTTP layer matches on them once, in ``post_api.errors.render``.
"""
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    id: Any

    @property
    def message(self) -> str:
        return f'Entity with id={self.id} not found'


@dataclass(frozen=True)
class ValidationFailure:
    message: str


Failure = Union[NotFound, ValidationFailure]
