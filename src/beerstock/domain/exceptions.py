"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and translate them into
user-facing messages or status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value is malformed or a beer invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested beer does not exist."""


class AlreadyExistsError(DomainException):
    """A beer with the same name is already registered."""


class CapacityExceededError(DomainException):
    """A stock change would push quantity outside ``[0, max]``."""
