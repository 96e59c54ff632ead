"""Custom exceptions for change-case-cli."""

from typing import Any, Dict, Optional


class ChangeCaseError(TypeError):
    """Base exception for all conversion input errors."""

    message: str = ""

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.message
        super().__init__(self.message)
        self.details = details or {}


class InvalidCaseIdentifier(ChangeCaseError):
    """Raised when the requested case is not one of the supported identifiers."""

    message = "Invalid case type."


class EmptyValue(ChangeCaseError):
    """Raised when there is no value to convert."""

    message = "No value provided."
