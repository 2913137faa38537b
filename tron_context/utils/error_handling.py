"""
Error handling utilities for the TRON client context.

This module provides the exception hierarchy raised by the client:
- A base exception carrying an error code and structured details
- Validation errors raised eagerly by setters and the constructor
- Errors raised by HTTP providers and configuration loading
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Error codes for the TRON client context."""
    # General errors
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    VALIDATION_ERROR = 1002

    # Provider errors
    INVALID_PROVIDER_CONFIG = 2000
    INVALID_PROVIDER_TYPE = 2001
    INVALID_PROVIDER_URL = 2002
    PROVIDER_REQUEST_ERROR = 2003

    # Event server errors
    INVALID_EVENT_SERVER_CONFIG = 3000
    INVALID_EVENT_SERVER_URL = 3001

    # Account errors
    INVALID_PRIVATE_KEY = 4000
    INVALID_ADDRESS = 4001

    # Block errors
    INVALID_BLOCK_IDENTIFIER = 5000


class TronClientError(Exception):
    """Base exception class for all TRON client errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize a new TronClientError.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        # Format the error message
        formatted_message = f"[{error_code.name}] {message}"
        if details:
            formatted_message += f" - Details: {details}"

        super().__init__(formatted_message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the error to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.error_code.name,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(TronClientError):
    """Error related to configuration issues."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class ValidationError(TronClientError):
    """Error related to validation failures."""

    default_message = "Invalid value provided"
    default_code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message or self.default_message, self.default_code, details)


class InvalidProviderConfig(ValidationError):
    """A node given to the client constructor could not be turned into a provider."""

    default_code = ErrorCode.INVALID_PROVIDER_CONFIG

    def __init__(self, node: str, reason: str):
        """
        Initialize the provider configuration error.

        Args:
            node: Which node failed ("full node" or "solidity node")
            reason: Message of the underlying validation failure
        """
        self.node = node
        self.reason = reason
        super().__init__(
            f"Invalid {node} provided: {reason}",
            details={"node": node, "reason": reason}
        )


class InvalidEventServerConfig(ValidationError):
    """The event server given to the client constructor is not a valid URL."""

    default_message = "Invalid URL provided for event server"
    default_code = ErrorCode.INVALID_EVENT_SERVER_CONFIG


class InvalidPrivateKey(ValidationError):
    default_message = "Invalid private key provided"
    default_code = ErrorCode.INVALID_PRIVATE_KEY


class InvalidBlockIdentifier(ValidationError):
    default_message = "Invalid block ID provided"
    default_code = ErrorCode.INVALID_BLOCK_IDENTIFIER


class InvalidAddress(ValidationError):
    default_message = "Invalid address provided"
    default_code = ErrorCode.INVALID_ADDRESS


class InvalidProviderType(ValidationError):
    """A provider setter received something that is neither a URL nor a provider."""

    default_message = "Invalid provider provided"
    default_code = ErrorCode.INVALID_PROVIDER_TYPE


class InvalidProviderURL(ValidationError):
    default_message = "Invalid URL provided to HttpProvider"
    default_code = ErrorCode.INVALID_PROVIDER_URL


class InvalidEventServerURL(ValidationError):
    default_message = "Invalid URL provided for event server"
    default_code = ErrorCode.INVALID_EVENT_SERVER_URL


class ProviderRequestError(TronClientError):
    """Exception for failed HTTP requests made through a provider."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the request error.

        Args:
            message: Error message
            status_code: HTTP status code, if a response was received
            endpoint: The URL that was requested
            details: Additional error details
        """
        self.status_code = status_code
        self.endpoint = endpoint

        error_details = details or {}
        if status_code:
            error_details["status_code"] = status_code
        if endpoint:
            error_details["endpoint"] = endpoint

        super().__init__(message, ErrorCode.PROVIDER_REQUEST_ERROR, error_details)
