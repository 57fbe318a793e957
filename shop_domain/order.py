"""
order.py — Order Aggregate

An order owns its line items, computes its total and guards the only
modelled status transition (Pending → Processing).
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from .errors import InvalidArgumentError, InvalidOrderStateError
from .models import OrderItem, OrderStatus, to_decimal

log = logging.getLogger(__name__)


class Order:
    """
    A customer order made of line items.

    Items can only be appended through add_item. The status property can be
    assigned directly; only process_order checks the current state.
    """

    def __init__(self, order_id: int, order_date: Optional[datetime] = None):
        """
        Args:
            order_id (int): Identifier assigned by the caller.
            order_date (datetime, optional): Creation time, defaults to now.
        """
        self._order_id = order_id
        self._order_date = order_date or datetime.now()
        self._status = OrderStatus.PENDING
        self._items: List[OrderItem] = []

    @property
    def order_id(self) -> int:
        return self._order_id

    @property
    def order_date(self) -> datetime:
        return self._order_date

    @property
    def status(self) -> OrderStatus:
        return self._status

    @status.setter
    def status(self, value):
        try:
            self._status = OrderStatus(value)
        except ValueError:
            raise InvalidArgumentError(f"Unknown order status: {value}", "status") from None

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def total_amount(self) -> Decimal:
        return sum((item.quantity * item.unit_price for item in self._items), Decimal("0"))

    def add_item(self, product_name: str, quantity: int, unit_price) -> OrderItem:
        """
        Appends a line item to the order.

        Args:
            product_name (str): Product name, must not be blank.
            quantity (int): Number of units, must be positive.
            unit_price: Price per unit, must not be negative.

        Returns:
            OrderItem: The item that was added.

        Raises:
            InvalidArgumentError: If any argument is out of range.
        """
        if not isinstance(product_name, str) or not product_name.strip():
            raise InvalidArgumentError("Product name cannot be empty", "product_name")

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidArgumentError("Quantity must be positive", "quantity")

        price = to_decimal(unit_price, "unit_price")
        if price < 0:
            raise InvalidArgumentError("Unit price cannot be negative", "unit_price")

        item = OrderItem(product_name=product_name, quantity=quantity, unit_price=price)
        self._items.append(item)
        return item

    def process_order(self):
        """
        Moves a pending order to Processing.

        Raises:
            InvalidOrderStateError: If the order is not pending.
        """
        if self._status != OrderStatus.PENDING:
            raise InvalidOrderStateError(self._order_id, self._status)

        self._status = OrderStatus.PROCESSING
        log.info(f"[Order: {self._order_id}] Status changed to {self._status.value}.")

    def get_summary(self) -> str:
        lines = [
            f"Order #{self._order_id}",
            f"Date: {self._order_date:%Y-%m-%d %H:%M}",
            f"Status: {self._status.value}",
            f"Items: {len(self._items)}",
            f"Total: ${self.total_amount:,.2f}",
        ]
        return "\n".join(lines) + "\n"

    def __repr__(self):
        return f"Order(order_id={self._order_id!r}, status={self._status.value!r}, items={len(self._items)})"
