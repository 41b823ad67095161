"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class GatewayError(AppError):
    """Raised when a call to the remote data store fails."""

    def __init__(self, message="The data service is unavailable."):
        """Initialize the error."""
        super().__init__(message, 502)


class SeedError(AppError):
    """Raised when loading the demo data is aborted."""

    def __init__(self, message="Demo data could not be loaded."):
        """Initialize the error."""
        super().__init__(message, 500)
