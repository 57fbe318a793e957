"""
models.py — Value Types for the Shop Domain

This module defines the enumerations and the immutable line item used by
orders and customers. OrderItem is a frozen Pydantic model so that a line
item cannot change once it has been added to an order.

Models:
    - OrderStatus: Lifecycle stage of an order.
    - MembershipLevel: Customer tier driving the discount rate.
    - OrderItem: Represents a single product line in an order.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .errors import InvalidArgumentError


def to_decimal(value, argument: str) -> Decimal:
    """
    Converts a monetary input to Decimal without binary float artifacts.

    Args:
        value: int, float, str or Decimal amount.
        argument (str): Parameter name reported when conversion fails.

    Raises:
        InvalidArgumentError: If the value is missing or not numeric.
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"{argument} must be a number", argument)
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidArgumentError(f"{argument} must be a number", argument) from None
    if not result.is_finite():
        raise InvalidArgumentError(f"{argument} must be a finite number", argument)
    return result


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class MembershipLevel(str, Enum):
    """Customer tiers, declared from lowest to highest."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class OrderItem(BaseModel):
    """
    Represents a single product line in an order.

    Range checks are done by Order.add_item before an item is created.

    Attributes:
        product_name (str): Name of the ordered product.
        quantity (int): Number of units ordered.
        unit_price (Decimal): Price of one unit.
    """
    model_config = ConfigDict(frozen=True)

    product_name: str
    quantity: int
    unit_price: Decimal

    @property
    def total_price(self) -> Decimal:
        return self.quantity * self.unit_price
