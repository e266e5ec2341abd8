"""Structured exception classes for acceptnorm.

The negotiation strategies themselves never raise for header input; these
errors belong to the layers around them (strategy dispatch, client and
server configuration).
"""

import json
from typing import Any, Dict, Iterable, Optional


class AcceptNormError(Exception):
    """Base exception for all acceptnorm errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class UnknownStrategyError(AcceptNormError):
    """Raised when a negotiation strategy name is not recognised.

    :param strategy: The strategy name that was requested
    :param available: Names of the strategies that do exist
    """

    def __init__(self, strategy: str, available: Iterable[str] = ()):
        """Initialize with the rejected name and the valid choices."""
        choices = sorted(available)
        super().__init__(
            message=f"Unknown negotiation strategy: {strategy!r}",
            code="UNKNOWN_STRATEGY",
            details={"strategy": strategy, "available": choices},
        )
        self.strategy = strategy


class ConfigurationError(AcceptNormError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)
