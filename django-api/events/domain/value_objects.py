"""Value objects shared by events and bookings.

Each one validates on construction, so a domain object holding one never
has to re-check it.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class UuidIdentifier:
    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Raises ValueError for anything that is not a UUID."""
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


class EventId(UuidIdentifier):
    pass


class TicketCategoryId(UuidIdentifier):
    pass


@dataclass(frozen=True)
class Money:
    """A non-negative amount in the single platform currency."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def times(self, quantity: int) -> Decimal:
        return (self.amount * quantity).quantize(CENTS)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """A ticket count: a category's limit or its sold counter."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def left_after(self, taken: "Capacity") -> int:
        """Units still free, floored at zero when ``taken`` overshoots."""
        return max(0, self.value - taken.value)
