"""
Centralized custom exception definitions for the view-counter service.

Each exception inherits from BaseAppError, which itself extends Werkzeug's
HTTPException, allowing clean integration with Flask's error system and
JSON-formatted API responses of the form ``{"error": true, "message": ...}``.

Domain Groups:
--------------
1. Validation Errors (400)
2. Store Errors (500)
3. System Errors (500)
"""

from werkzeug.exceptions import HTTPException


class BaseAppError(HTTPException):
    """Root application error, base for all custom exceptions."""
    code = 500
    description = "Application error"

    def __init__(self, message=None, details=None, code=None):
        super().__init__(description=message or self.description)
        self.message = message or self.description
        self.details = details or {}
        if code:
            self.code = code

    def to_dict(self):
        """Serialize error info into a JSON-safe dictionary."""
        payload = {"error": True, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


# ==============================================================================
# 1. VALIDATION ERRORS (HTTP 400)
# ==============================================================================

class ValidationError(BaseAppError):
    code = 400
    description = "Validation error"


class InvalidSlugError(ValidationError):
    description = "Invalid post slug"


# ==============================================================================
# 2. STORE ERRORS (HTTP 500)
# ==============================================================================

class StoreAccessError(BaseAppError):
    """
    Raised when the document store cannot be read or written
    (network, permission or quota failures). Never retried.
    """
    code = 500
    description = "Document store access failed"


class CounterTypeError(StoreAccessError):
    """Raised when a server-side increment hits a non-numeric field."""
    description = "Stored counter is not numeric"


# ==============================================================================
# 3. SYSTEM ERRORS (HTTP 500)
# ==============================================================================

class ConfigurationError(BaseAppError):
    code = 500
    description = "Configuration missing or invalid"
