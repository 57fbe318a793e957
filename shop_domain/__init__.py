"""Customer and order domain model with membership discounts and payment validation."""

from .customer import Customer, is_valid_email
from .errors import (
    InvalidArgumentError,
    InvalidOperationError,
    InvalidOrderStateError,
    OrderLimitExceededError,
    ShopDomainError,
)
from .logging_config import ConsoleLogger, Logger, get_logger, setup_logging
from .models import MembershipLevel, OrderItem, OrderStatus
from .order import Order
from .payment import CreditCardPaymentProcessor, PaymentProcessor

__all__ = [
    "ConsoleLogger",
    "CreditCardPaymentProcessor",
    "Customer",
    "InvalidArgumentError",
    "InvalidOperationError",
    "InvalidOrderStateError",
    "Logger",
    "MembershipLevel",
    "Order",
    "OrderItem",
    "OrderLimitExceededError",
    "OrderStatus",
    "PaymentProcessor",
    "ShopDomainError",
    "get_logger",
    "is_valid_email",
    "setup_logging",
]
