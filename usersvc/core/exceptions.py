from typing import Optional, Any


class UserServiceError(Exception):
    """
    Base exception for the users service.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(UserServiceError):
    """
    Raised when a user document is rejected, at the boundary or by the store.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=422, details=details)


class StoreUnavailableError(UserServiceError):
    """
    Raised when the document store cannot be reached.
    """
    def __init__(self, message: str = "Data store unavailable", details: Optional[Any] = None):
        super().__init__(message, code="STORE_UNAVAILABLE", status_code=503, details=details)
