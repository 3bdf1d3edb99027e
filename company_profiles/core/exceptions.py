"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class CompanyNotFoundException(NotFoundException):
    """No job listings exist for the requested company"""

    def __init__(self, identifier: Optional[str] = None):
        super().__init__(message="Company not found", code="COMPANY_NOT_FOUND")
        self.identifier = identifier
        if identifier is not None:
            self.details = {"company": identifier}
