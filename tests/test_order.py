"""Tests for Order and OrderItem."""

from datetime import datetime
from decimal import Decimal

import pydantic
import pytest

from shop_domain import InvalidArgumentError, InvalidOperationError, InvalidOrderStateError, OrderItem, OrderStatus
from shop_domain.order import Order


class TestOrderItem:
    def test_total_price(self):
        item = OrderItem(product_name="Widget", quantity=3, unit_price=Decimal("2.50"))

        assert item.total_price == Decimal("7.50")

    def test_is_immutable(self):
        item = OrderItem(product_name="Widget", quantity=3, unit_price=Decimal("2.50"))

        with pytest.raises(pydantic.ValidationError):
            item.quantity = 5


class TestOrderConstruction:
    def test_defaults(self, order):
        assert order.order_id == 1
        assert order.status == OrderStatus.PENDING
        assert order.items == ()
        assert order.total_amount == Decimal("0")
        assert isinstance(order.order_date, datetime)

    def test_explicit_order_date(self):
        when = datetime(2023, 5, 17, 9, 30)

        assert Order(7, order_date=when).order_date == when


class TestAddItem:
    def test_total_sums_items_in_order(self, order):
        order.add_item("Widget", 2, 9.99)
        order.add_item("Gadget", 1, "0.02")
        order.add_item("Freebie", 5, 0)

        assert order.total_amount == Decimal("20.00")
        assert [item.product_name for item in order.items] == ["Widget", "Gadget", "Freebie"]
        assert order.item_count == 3

    def test_returns_created_item(self, order):
        item = order.add_item("Widget", 2, 9.99)

        assert item.unit_price == Decimal("9.99")
        assert item.total_price == Decimal("19.98")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_product_name_raises(self, order, name):
        with pytest.raises(InvalidArgumentError) as exc_info:
            order.add_item(name, 1, 1)

        assert exc_info.value.argument == "product_name"
        assert order.items == ()

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_raises(self, order, quantity):
        with pytest.raises(InvalidArgumentError, match="Quantity must be positive"):
            order.add_item("Widget", quantity, 1)

    def test_negative_price_raises(self, order):
        with pytest.raises(InvalidArgumentError, match="Unit price cannot be negative"):
            order.add_item("Widget", 1, -0.01)

    def test_non_numeric_price_raises(self, order):
        with pytest.raises(InvalidArgumentError):
            order.add_item("Widget", 1, "cheap")

    def test_items_snapshot_is_read_only(self, order):
        order.add_item("Widget", 1, 1)

        with pytest.raises(AttributeError):
            order.items.append("x")


class TestProcessOrder:
    def test_pending_moves_to_processing(self, order):
        order.process_order()

        assert order.status == OrderStatus.PROCESSING

    def test_second_call_raises(self, order):
        order.process_order()

        with pytest.raises(InvalidOperationError, match="Only pending orders can be processed"):
            order.process_order()

    @pytest.mark.parametrize(
        "status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED]
    )
    def test_non_pending_raises(self, order, status):
        order.status = status

        with pytest.raises(InvalidOrderStateError) as exc_info:
            order.process_order()

        assert exc_info.value.order_id == 1
        assert exc_info.value.status == status
        assert order.status == status

    def test_logs_transition(self, order, caplog):
        with caplog.at_level("INFO", logger="shop_domain.order"):
            order.process_order()

        assert "[Order: 1] Status changed to Processing." in caplog.text


class TestStatusAssignment:
    def test_direct_assignment_is_unguarded(self, order):
        order.status = OrderStatus.DELIVERED
        order.status = "Pending"

        assert order.status == OrderStatus.PENDING

    def test_unknown_status_raises(self, order):
        with pytest.raises(InvalidArgumentError):
            order.status = "Lost"


class TestGetSummary:
    def test_layout(self):
        order = Order(42, order_date=datetime(2024, 3, 5, 14, 7, 59))
        order.add_item("Widget", 2, 9.99)
        order.add_item("Laptop", 1, 1200)

        assert order.get_summary() == (
            "Order #42\n"
            "Date: 2024-03-05 14:07\n"
            "Status: Pending\n"
            "Items: 2\n"
            "Total: $1,219.98\n"
        )

    def test_empty_order(self, order):
        summary = order.get_summary()

        assert "Items: 0" in summary
        assert "Total: $0.00" in summary
