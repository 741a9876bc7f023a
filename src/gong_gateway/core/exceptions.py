"""
Custom Exceptions for the Gong Gateway
Provides structured error handling for upstream API failures
"""

from typing import Optional, Dict, Any


class GongGatewayException(Exception):
    """Base exception for all gateway errors"""

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging or API responses"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class GongAPIError(GongGatewayException):
    """
    Raised when the Gong API answers with a non-success status.

    Auth, quota and validation failures all surface as this one kind;
    callers inspect ``status_code`` and ``response_text`` to tell them apart.
    """

    def __init__(self, status_code: int, response_text: str):
        self.response_text = response_text
        super().__init__(
            message=f"Gong API error ({status_code}): {response_text}",
            error_code="GONG_API_ERROR",
            details={
                "status_code": status_code,
                "response_text": response_text
            },
            status_code=status_code
        )


class MissingCredentialsError(GongGatewayException):
    """Raised when the access key or its secret is not configured"""

    def __init__(self, missing: str):
        super().__init__(
            message=f"Gong credentials not configured: {missing}",
            error_code="MISSING_CREDENTIALS",
            details={
                "missing": missing,
                "hint": "Set GONG_ACCESS_KEY and GONG_ACCESS_KEY_SECRET"
            },
            status_code=401
        )
