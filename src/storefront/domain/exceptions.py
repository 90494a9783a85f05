"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidOperationError(DomainException):
    """The operation is not allowed in the current state (e.g. adding an
    expired product to a cart)."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart without lines."""


class ProductUnavailableError(DomainException):
    """A cart line can no longer be satisfied at checkout time."""


class InsufficientFundsError(DomainException):
    """The customer's balance does not cover the amount due."""
