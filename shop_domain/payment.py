"""
payment.py — Payment Processing Collaborator

This module provides the payment-processor capability used by callers of the
domain model. It is not referenced by Customer or Order.

The credit card processor only validates: a positive amount is returned
unchanged, nothing is charged.
"""

from decimal import Decimal
from typing import Optional, Protocol

from .errors import InvalidArgumentError
from .logging_config import Logger
from .models import to_decimal

SUPPORTED_PAYMENT_METHODS = ("creditcard", "debitcard")


class PaymentProcessor(Protocol):
    """Capability for anything that can take and validate payments."""

    def process_payment(self, amount, currency: str) -> Decimal: ...

    def validate_payment_method(self, payment_method: Optional[str]) -> bool: ...


class CreditCardPaymentProcessor:
    """
    Payment processor for card payments.

    Every attempt is logged; failures are logged as errors and re-raised.
    """

    def __init__(self, logger: Logger):
        if logger is None:
            raise InvalidArgumentError("Logger cannot be None", "logger")
        self._logger = logger

    def process_payment(self, amount, currency: str) -> Decimal:
        """
        Validates a payment amount.

        Args:
            amount: Amount in major currency units.
            currency (str): ISO 4217 currency code (e.g., 'EUR', 'USD').

        Returns:
            Decimal: The amount, unchanged.

        Raises:
            InvalidArgumentError: If the amount is not positive.
        """
        try:
            self._logger.log_info(f"Processing payment of {amount} {currency}")

            value = to_decimal(amount, "amount")
            if value <= 0:
                raise InvalidArgumentError("Amount must be positive", "amount")

            return value
        except Exception as e:
            self._logger.log_error("Payment processing failed", e)
            raise

    def validate_payment_method(self, payment_method: Optional[str]) -> bool:
        method = (payment_method or "").lower()
        return method in SUPPORTED_PAYMENT_METHODS
