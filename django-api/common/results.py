"""Typed outcome of a write against the backing store."""

from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from common.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class WriteResult(Generic[T]):
    """Either a written value or the error that prevented the write.

    Stores return this instead of raising so callers decide whether to
    wait on the outcome or dispatch and move on.
    """

    value: T | None = None
    error: DomainError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Self:
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainError) -> Self:
        return cls(error=error)

    def unwrap(self) -> T | None:
        """Return the value, raising the carried error if the write failed."""
        if self.error is not None:
            raise self.error
        return self.value
