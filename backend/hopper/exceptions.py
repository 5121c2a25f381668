"""
Hopper Exceptions

All application errors inherit from HopperError.
"""
from typing import Optional


class HopperError(Exception):
    """Base application error"""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.message = message
        self.operation = operation
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class ValidationError(HopperError):
    """
    Request validation error

    Raised for malformed bodies or out-of-range fields. Always a client error.
    """


class NotFoundError(HopperError):
    """
    Point lookup miss

    Attributes:
        singer_id: key that was not found
    """

    def __init__(self, singer_id: str, operation: Optional[str] = None):
        self.singer_id = singer_id
        super().__init__(f"singer not found. id={singer_id}", operation)


class PersistenceError(HopperError):
    """
    Backing store failure

    Wraps any driver error raised while reading from or committing to the
    database.

    Attributes:
        original_error: the driver exception
    """

    def __init__(
        self,
        operation: str,
        message: str,
        original_error: Optional[Exception] = None
    ):
        self.original_error = original_error
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(message, operation)


class ConfigurationError(HopperError):
    """Invalid or missing settings"""
