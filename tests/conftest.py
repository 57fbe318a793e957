"""Pytest fixtures for shop_domain tests."""

from datetime import datetime

import pytest

from shop_domain import ConsoleLogger, CreditCardPaymentProcessor, Customer, Order


class RecordingLogger:
    """Logger double that keeps every call."""

    def __init__(self):
        self.infos = []
        self.errors = []

    def log_info(self, message):
        self.infos.append(message)

    def log_error(self, message, error=None):
        self.errors.append((message, error))


@pytest.fixture
def customer():
    """Create a Bronze customer without orders."""
    return Customer("Jane", "Doe", "jane@doe.com")


@pytest.fixture
def order():
    """Create an empty pending order."""
    return Order(1)


@pytest.fixture
def make_order():
    """Factory for orders with a fixed creation time and one item."""

    def _make(order_id, order_date=None, price="10.00"):
        new_order = Order(order_id, order_date=order_date or datetime(2024, 1, 1, 12, 0))
        new_order.add_item("Widget", 1, price)
        return new_order

    return _make


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def processor(recording_logger):
    return CreditCardPaymentProcessor(recording_logger)


@pytest.fixture
def console_logger():
    return ConsoleLogger("shop_domain.tests")
