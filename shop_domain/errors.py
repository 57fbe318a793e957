"""Custom exceptions for the shop domain model."""


class ShopDomainError(Exception):
    """Base exception for all shop domain errors."""

    pass


class InvalidArgumentError(ShopDomainError, ValueError):
    """Raised when a constructor, setter or method receives malformed input."""

    def __init__(self, message: str, argument: str | None = None):
        self.argument = argument
        super().__init__(message)


class InvalidOperationError(ShopDomainError):
    """Raised when a valid input would break a domain rule."""

    pass


class OrderLimitExceededError(InvalidOperationError):
    """Raised when a customer already holds the maximum number of orders."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum {limit} orders per day exceeded")


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order is not in the state an operation requires."""

    def __init__(self, order_id: int, status, message: str = "Only pending orders can be processed"):
        self.order_id = order_id
        self.status = status
        super().__init__(message)
