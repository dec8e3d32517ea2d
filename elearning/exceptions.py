"""
E-Learning Custom Exceptions

This module provides the exception hierarchy used by the E-Learning services
and the DRF exception handler that renders them. Every error leaves the API
as a JSON object carrying a ``title``/``detail`` pair plus optional
structured details (e.g. the list of unanswered questions).

Exceptions:
- ElearningException: Base class with status code, error code and details
- ValidationException: Malformed or incomplete input (400)
- AuthenticationException: Missing or invalid caller identity (401)
- NotFoundException: Unknown resource (404)
- InternalServerException: Unexpected persistence or logic failure (500)

Author: EduSync Development Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ElearningException(Exception):
    """
    Base exception class for all E-Learning service errors.

    Attributes:
        message (str): Human-readable error message, rendered as ``detail``
        status_code (int): HTTP status code used for the response
        error_code (str): Short machine-readable error identifier
        details (Dict[str, Any]): Additional structured error information

    Example:
        >>> try:
        ...     scorer.submit(assessment_id, answers, user)
        ... except ElearningException as e:
        ...     logger.warning(f"Submission rejected: {e.message}")
    """

    title = "Error"
    default_status_code = status.HTTP_400_BAD_REQUEST
    default_error_code = "Error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize an E-Learning exception.

        Args:
            message: Human-readable error description
            status_code: HTTP status code, defaults to the class default
            error_code: Error identifier, defaults to the class default
            details: Additional context merged into the response body
        """
        self.message = message
        self.status_code = status_code or self.default_status_code
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to the response payload.

        Returns:
            Dictionary with title, detail and any additional details
        """
        payload = {"title": self.title, "detail": self.message}
        payload.update(self.details)
        return payload


class ValidationException(ElearningException):
    """
    Exception for malformed or incomplete client input.

    Raised for empty answer sets, malformed identifiers, unanswered
    questions and similar user-correctable problems.
    """

    title = "Validation error"
    default_status_code = status.HTTP_400_BAD_REQUEST
    default_error_code = "ValidationError"


class AuthenticationException(ElearningException):
    """Exception raised when the caller identity is missing or invalid."""

    title = "Authentication error"
    default_status_code = status.HTTP_401_UNAUTHORIZED
    default_error_code = "AuthenticationError"

    def __init__(self, message: str = "Invalid user session", **kwargs) -> None:
        super().__init__(message, **kwargs)


class NotFoundException(ElearningException):
    """
    Exception raised when a requested resource does not exist.

    Attributes:
        resource (Optional[str]): Type of the missing resource
    """

    title = "Not found"
    default_status_code = status.HTTP_404_NOT_FOUND
    default_error_code = "NotFound"

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.resource = resource
        super().__init__(message, details=details)


class InternalServerException(ElearningException):
    """Exception for unexpected failures. The original error is only logged."""

    title = "Internal Server Error"
    default_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error_code = "InternalError"

    def __init__(
        self, message: str = "An error occurred while processing your request"
    ) -> None:
        super().__init__(message)


# Titles for the exceptions raised by DRF itself
API_EXCEPTION_TITLES = {
    status.HTTP_400_BAD_REQUEST: "Validation error",
    status.HTTP_401_UNAUTHORIZED: "Authentication error",
    status.HTTP_403_FORBIDDEN: "Permission denied",
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
    status.HTTP_429_TOO_MANY_REQUESTS: "Too many requests",
}

FIELD_ERRORS_DETAIL = "One or more fields are invalid"


def elearning_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """
    DRF exception handler rendering ElearningException subclasses.

    DRF's own exceptions are handled by the default handler; responses whose
    body is a plain ``{"detail": ...}`` object get a matching ``title``, field
    errors are wrapped as ``{"title", "detail", "errors"}``.

    Args:
        exc: The raised exception
        context: DRF handler context (view, request, ...)

    Returns:
        Response or None for exceptions DRF does not know about
    """
    if isinstance(exc, ElearningException):
        if exc.status_code >= 500:
            logger.error(f"{exc.__class__.__name__} in {context.get('view').__class__.__name__}: {exc.message}")
        return Response(exc.to_dict(), status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, APIException):
        title = API_EXCEPTION_TITLES.get(response.status_code, "Error")
        if isinstance(response.data, dict) and "detail" in response.data:
            response.data.setdefault("title", title)
        else:
            # Feldfehler der Serializer (dict pro Feld oder Liste)
            response.data = {
                "title": title,
                "detail": FIELD_ERRORS_DETAIL,
                "errors": response.data,
            }
    return response
