"""gqlforge custom exceptions."""

from typing import Any, Dict, List, Optional


class GQLForgeError(Exception):
    """Base exception for gqlforge."""
    pass

class ConfigurationError(GQLForgeError):
    """Raised when client configuration is invalid."""
    pass

class ValidationError(GQLForgeError):
    """Raised when a query or its variables fail validation."""
    pass

class TransportError(GQLForgeError):
    """Raised when the HTTP exchange with the GraphQL endpoint fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class ApplicationError(GQLForgeError):
    """Raised on request when a GraphQL response carries an errors list."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

class OperationError(GQLForgeError):
    """Raised by the request executor for any terminal failure."""
    pass
