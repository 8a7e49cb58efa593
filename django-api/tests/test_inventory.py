"""Unit tests for ticket quantity selection."""

import uuid
from dataclasses import replace
from decimal import Decimal

import pytest

from bookings.domain import SelectionWarning, TicketSelection
from events.domain import Money
from events.domain.errors import TicketCategoryNotFoundError
from fakes import make_category


def select(selection, categories, category, delta, cap=3):
    return selection.adjust(categories, str(category.id), delta, cap)


class TestAdjust:
    def test_increment_adds_line_with_snapshot_price(self):
        category = make_category(price="75.00")
        outcome = select(TicketSelection(), [category], category, 1)

        assert outcome.changed
        assert outcome.selection.quantity(str(category.id)) == 1
        assert outcome.selection.lines[0].unit_price == Decimal("75.00")

    def test_decrement_never_goes_below_zero(self):
        category = make_category()
        outcome = select(TicketSelection(), [category], category, -1)

        assert outcome.selection.quantity(str(category.id)) == 0
        assert outcome.selection.is_empty

    def test_decrement_to_zero_removes_line(self):
        category = make_category()
        selection = select(TicketSelection(), [category], category, 1).selection
        selection = select(selection, [category], category, -1).selection

        assert selection.lines == ()

    def test_capped_at_remaining_capacity(self):
        """limit 10, sold 8: two can be selected, a third is refused."""
        category = make_category(price="50.00", limit=10, sold=8)
        selection = TicketSelection()
        for _ in range(2):
            selection = select(selection, [category], category, 1).selection

        assert selection.quantity(str(category.id)) == 2
        assert selection.total_price() == Decimal("100.00")

        refused = select(selection, [category], category, 1)
        assert refused.warning is SelectionWarning.SOLD_OUT
        assert refused.selection is selection

    def test_large_delta_is_clamped_to_remaining(self):
        category = make_category(limit=10, sold=8)
        outcome = select(TicketSelection(), [category], category, 5, cap=10)

        assert outcome.selection.quantity(str(category.id)) == 2

    def test_sold_out_category_cannot_be_selected(self):
        category = make_category(limit=5, sold=5)
        outcome = select(TicketSelection(), [category], category, 1)

        assert outcome.warning is SelectionWarning.SOLD_OUT
        assert outcome.selection.is_empty

    def test_per_event_cap_across_categories(self):
        general = make_category("General")
        vip = make_category("VIP", price="120.00")
        categories = [general, vip]
        selection = select(TicketSelection(), categories, general, 2).selection
        selection = select(selection, categories, vip, 1).selection
        assert selection.total_tickets() == 3

        refused = select(selection, categories, vip, 1)
        assert refused.warning is SelectionWarning.LIMIT_REACHED
        assert refused.selection.total_tickets() == 3

    def test_total_price_sums_lines(self):
        general = make_category("General", price="50.00")
        vip = make_category("VIP", price="120.00")
        selection = select(TicketSelection(), [general, vip], general, 2).selection
        selection = select(selection, [general, vip], vip, 1).selection

        assert selection.total_price() == Decimal("220.00")

    def test_unknown_category_raises(self):
        with pytest.raises(TicketCategoryNotFoundError):
            TicketSelection().adjust([make_category()], str(uuid.uuid4()), 1)

    def test_snapshot_price_survives_later_price_change(self):
        category = make_category(price="50.00")
        selection = select(TicketSelection(), [category], category, 1).selection
        repriced = replace(category, price=Money(Decimal("80.00")))

        selection = select(selection, [repriced], repriced, 1).selection
        assert selection.total_price() == Decimal("100.00")


class TestSerialization:
    def test_dict_form_restores_selection(self):
        category = make_category(price="12.50")
        selection = select(TicketSelection(), [category], category, 2).selection

        restored = TicketSelection.from_dict(selection.to_dict())
        assert restored == selection
