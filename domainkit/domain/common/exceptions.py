"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
invariants are broken or a required input is missing at a domain
boundary. They are raised synchronously and are never retried.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when a value object's invariants are violated.

    Example: Invalid email format, negative quantity, etc.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class ArgumentError(DomainError, ValueError):
    """
    Raised when a required argument is absent.

    Example: Wrapping a ``None`` domain event in a notification.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        msg = message or f"Argument '{argument}' is required"
        super().__init__(msg, {"argument": argument})
        self.argument = argument
