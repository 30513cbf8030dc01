"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class InvalidDomainError(ApplicationError):
    """Exception raised when a domain field receives a value that breaks its invariant."""

    def __init__(self, field_name: str, original_exception: Exception | None = None) -> None:
        super().__init__(f"Invalid domain value: {field_name}", original_exception)
        self.field_name = field_name
