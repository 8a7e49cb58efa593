"""Ticket quantity selection against an event's categories.

A selection holds the quantity chosen per ticket category together with the
unit price seen when the category was first picked. Nothing here writes to
storage; remaining capacity is read from the categories passed in and is
not reserved.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Self

from events.domain import TicketCategory
from events.domain.errors import TicketCategoryNotFoundError

MAX_TICKETS_PER_EVENT = 3


class SelectionWarning(str, Enum):
    LIMIT_REACHED = "limit-reached"
    SOLD_OUT = "sold-out"


WARNING_MESSAGES = {
    SelectionWarning.LIMIT_REACHED: "You can book a maximum of {cap} tickets per event.",
    SelectionWarning.SOLD_OUT: "No more tickets are available in this category.",
}


def remaining(category: TicketCategory) -> int:
    """Tickets left in a category, never below zero."""
    return category.remaining


@dataclass(frozen=True)
class SelectionLine:
    category_id: str
    category_name: str
    unit_price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class AdjustOutcome:
    selection: "TicketSelection"
    warning: SelectionWarning | None = None

    @property
    def changed(self) -> bool:
        return self.warning is None


@dataclass(frozen=True)
class TicketSelection:
    lines: tuple[SelectionLine, ...] = ()

    def quantity(self, category_id: str) -> int:
        line = self._line(category_id)
        return line.quantity if line else 0

    def total_tickets(self) -> int:
        return sum(line.quantity for line in self.lines)

    def total_price(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return self.total_tickets() == 0

    def adjust(
        self,
        categories: Sequence[TicketCategory],
        category_id: str,
        delta: int,
        cap: int = MAX_TICKETS_PER_EVENT,
    ) -> AdjustOutcome:
        """Change one category's quantity by ``delta``.

        Quantities never drop below zero. An increase is capped at the
        category's remaining capacity, and a change that would push the
        total past ``cap`` is refused. Refusals return this selection
        unchanged with a warning.

        Raises:
            TicketCategoryNotFoundError: If the category is not in ``categories``.
        """
        category = next((c for c in categories if str(c.id) == category_id), None)
        if category is None:
            raise TicketCategoryNotFoundError(category_id)

        current = self.quantity(category_id)
        proposed = max(0, current + delta)

        if proposed > current:
            available = remaining(category)
            if proposed > available:
                proposed = max(current, available)
                if proposed == current:
                    return AdjustOutcome(self, SelectionWarning.SOLD_OUT)

            if self.total_tickets() - current + proposed > cap:
                return AdjustOutcome(self, SelectionWarning.LIMIT_REACHED)

        if proposed == current:
            return AdjustOutcome(self)
        return AdjustOutcome(self._with_quantity(category, proposed))

    def _line(self, category_id: str) -> SelectionLine | None:
        for line in self.lines:
            if line.category_id == category_id:
                return line
        return None

    def _with_quantity(self, category: TicketCategory, quantity: int) -> Self:
        category_id = str(category.id)
        existing = self._line(category_id)

        if quantity == 0:
            return replace(self, lines=tuple(line for line in self.lines if line.category_id != category_id))
        if existing is None:
            line = SelectionLine(
                category_id=category_id,
                category_name=category.name,
                unit_price=category.price.amount,
                quantity=quantity,
            )
            return replace(self, lines=self.lines + (line,))
        # Keep the unit price captured when the category was first selected.
        return replace(
            self,
            lines=tuple(
                replace(line, quantity=quantity) if line.category_id == category_id else line
                for line in self.lines
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": [
                {
                    "category_id": line.category_id,
                    "category_name": line.category_name,
                    "unit_price": str(line.unit_price),
                    "quantity": line.quantity,
                }
                for line in self.lines
            ]
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            lines=tuple(
                SelectionLine(
                    category_id=line["category_id"],
                    category_name=line["category_name"],
                    unit_price=Decimal(line["unit_price"]),
                    quantity=int(line["quantity"]),
                )
                for line in data.get("lines", [])
            )
        )
