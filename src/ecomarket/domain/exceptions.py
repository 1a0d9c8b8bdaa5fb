"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the web
and CLI layers can catch them uniformly and map them to a response.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or input constraint was violated."""


class AuthenticationRequired(DomainException):
    """No authenticated identity accompanied the request."""


class PermissionDenied(DomainException):
    """The identity is authenticated but its role may not do this."""


class DataAccessError(DomainException):
    """An underlying store read or write failed."""
