"""This module contains the exception hierarchy of ``scitypes`` along with
utility functions to help format the errors raised by its internals.

Every error derives from :class:`ScitypeError` as well as the builtin
exception that best describes it, so callers can catch either one.
"""
from .type_hints import list_like


def shorten_list(seq: list_like, max_length: int = 5) -> str:
    """Converts a list-like into an abridged string for use in error messages.
    """
    seq = [repr(i) if isinstance(i, str) else str(i) for i in seq]
    if len(seq) <= max_length:
        return f"[{', '.join(seq)}]"
    shortened = ", ".join(seq[:max_length])
    return f"[{shortened}, ...] ({len(seq)})"


######################
####    ERRORS    ####
######################


class ScitypeError(Exception):
    """Base class for all errors raised by ``scitypes``."""


class ConventionError(ScitypeError, KeyError):
    """Misuse of a :class:`ConventionRegistry <scitypes.ConventionRegistry>`.
    """

    def __str__(self) -> str:
        # KeyError quotes its message by default
        return Exception.__str__(self)


class UnknownConventionError(ConventionError):
    """Raised when activating or looking up a convention that was never
    registered.
    """


class DuplicateConventionError(ConventionError):
    """Raised when registering a convention under a name that is already in
    use.
    """


class NotATableError(ScitypeError, TypeError):
    """Raised when an operation that requires tabular data receives something
    else.
    """


class CoercionError(ScitypeError, ValueError):
    """Base class for recoverable failures of :func:`coerce() <scitypes.coerce>`.
    """


class LevelCountMismatchError(CoercionError):
    """The observed number of levels does not match a fixed finite arity."""


class NonIntegralValueError(CoercionError):
    """Non-integral values were encountered while coercing to ``Count``."""


class UnsupportedCoercionError(CoercionError):
    """The requested target can never be satisfied by the given data."""


class UnknownRuleError(ScitypeError, KeyError):
    """Raised when :func:`autotype() <scitypes.autotype>` is given a rule name
    that is not registered.
    """

    def __str__(self) -> str:
        return Exception.__str__(self)
