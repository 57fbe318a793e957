"""
customer.py — Customer Aggregate

A customer owns an append-only list of orders (capped per day), derives a
discount rate from its membership tier and renders a plain-text report.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from .errors import InvalidArgumentError, OrderLimitExceededError
from .models import MembershipLevel, OrderStatus
from .order import Order

log = logging.getLogger(__name__)

DISCOUNT_RATES = {
    MembershipLevel.BRONZE: Decimal("0.05"),
    MembershipLevel.SILVER: Decimal("0.10"),
    MembershipLevel.GOLD: Decimal("0.15"),
    MembershipLevel.PLATINUM: Decimal("0.20"),
}

NEXT_LEVEL = {
    MembershipLevel.BRONZE: MembershipLevel.SILVER,
    MembershipLevel.SILVER: MembershipLevel.GOLD,
    MembershipLevel.GOLD: MembershipLevel.PLATINUM,
}


def is_valid_email(value) -> bool:
    """Returns True for a non-blank string containing both '@' and '.'."""
    if not isinstance(value, str) or not value.strip():
        return False
    return "@" in value and "." in value


class Customer:
    """
    A registered customer and the orders placed today.

    Attributes:
        MAX_ORDERS_PER_DAY (int): Upper bound for the number of held orders.
        DEFAULT_DISCOUNT_RATE (Decimal): Rate of the entry tier.
    """

    MAX_ORDERS_PER_DAY = 10
    DEFAULT_DISCOUNT_RATE = DISCOUNT_RATES[MembershipLevel.BRONZE]

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str,
        membership_level: MembershipLevel = MembershipLevel.BRONZE,
    ):
        """
        Raises:
            InvalidArgumentError: If a name is blank, the email is malformed
                or the membership level is unknown.
        """
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.membership_level = membership_level
        self._registration_date = datetime.now()
        self._orders: List[Order] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str):
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError("First name cannot be empty", "first_name")
        self._first_name = value

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str):
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError("Last name cannot be empty", "last_name")
        self._last_name = value

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str):
        if not is_valid_email(value):
            raise InvalidArgumentError("Invalid email format", "email")
        self._email = value

    @property
    def membership_level(self) -> MembershipLevel:
        return self._membership_level

    @membership_level.setter
    def membership_level(self, value):
        try:
            self._membership_level = MembershipLevel(value)
        except ValueError:
            raise InvalidArgumentError(f"Unknown membership level: {value}", "membership_level") from None

    @property
    def registration_date(self) -> datetime:
        return self._registration_date

    @property
    def orders(self) -> Tuple[Order, ...]:
        return tuple(self._orders)

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def years_since_registration(self) -> int:
        return datetime.now().year - self._registration_date.year

    @property
    def is_premium_member(self) -> bool:
        return self._membership_level in (MembershipLevel.GOLD, MembershipLevel.PLATINUM)

    def add_order(self, order: Optional[Order]):
        """
        Appends an order to the customer.

        Raises:
            InvalidArgumentError: If no order is given.
            OrderLimitExceededError: If MAX_ORDERS_PER_DAY orders are already held.
        """
        if order is None:
            raise InvalidArgumentError("Order cannot be None", "order")

        if len(self._orders) >= self.MAX_ORDERS_PER_DAY:
            log.warning(f"[Customer: {self._email}] Order {order.order_id} rejected, daily limit reached.")
            raise OrderLimitExceededError(self.MAX_ORDERS_PER_DAY)

        self._orders.append(order)

    def get_total_spent(self) -> Decimal:
        return sum((order.total_amount for order in self._orders), Decimal("0"))

    def get_orders_by_status(self, status: OrderStatus) -> List[Order]:
        """Returns the orders in the given status, most recent first."""
        matching = [order for order in self._orders if order.status == status]
        return sorted(matching, key=lambda order: order.order_date, reverse=True)

    def get_discount_rate(self) -> Decimal:
        return DISCOUNT_RATES.get(self._membership_level, Decimal("0.00"))

    def upgrade_membership(self) -> MembershipLevel:
        """Moves the customer one tier up; Platinum customers stay Platinum."""
        next_level = NEXT_LEVEL.get(self._membership_level)
        if next_level is not None:
            log.info(
                f"[Customer: {self._email}] Membership upgraded "
                f"{self._membership_level.value} -> {next_level.value}."
            )
            self._membership_level = next_level
        return self._membership_level

    def generate_report(self) -> str:
        lines = [
            "=== Customer Report ===",
            f"Name: {self.full_name}",
            f"Email: {self._email}",
            f"Membership: {self._membership_level.value}",
            f"Member Since: {self._registration_date:%Y-%m-%d}",
            f"Years Active: {self.years_since_registration}",
            f"Total Orders: {len(self._orders)}",
            f"Total Spent: ${self.get_total_spent():,.2f}",
            f"Discount Rate: {self.get_discount_rate():.0%}",
        ]
        return "\n".join(lines) + "\n"

    def __str__(self):
        return f"Customer: {self.full_name} ({self._email})"
