"""Exception hierarchy for the CRM + Sales domain."""


class DomainError(Exception):
    """Base exception for all domain errors."""


class InvalidArgumentError(DomainError, ValueError):
    """
    A precondition on a constructor or operation argument was violated.

    Raised synchronously where the violation is detected. Subclasses
    ValueError so callers that only know the standard library can still
    catch it.
    """
