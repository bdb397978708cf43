"""Domain-level exceptions.

Collection operations report problems through ``Result`` values (see
``ims.domain.results``). Exceptions are reserved for code that bypasses the
factories and tries to build an invalid Item directly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""
