"""This module describes the non-parametric scitypes, which form the trunk of
the scitype tree, along with the ``Missing`` type that sits beside it.
"""
from __future__ import annotations

from .base import CompositeType, ScientificType, Union


class FoundType(ScientificType):
    """Root of the scitype tree.  Every non-missing scalar is ``Found``."""

    name = "Found"


class KnownType(FoundType):
    """Values whose scientific interpretation is understood."""

    name = "Known"


class UnknownType(FoundType):
    """Fallback for values that no convention rule matches."""

    name = "Unknown"


class InfiniteType(KnownType):
    """Values drawn from an unbounded set."""

    name = "Infinite"


class ContinuousType(InfiniteType):
    """Real-valued measurements."""

    name = "Continuous"


class CountType(InfiniteType):
    """Non-negative (or at least integral) counts."""

    name = "Count"


class TextualType(KnownType):
    """Free text that has not been interpreted as a finite set of classes."""

    name = "Textual"


class MissingType(ScientificType):
    """The scitype of the missing-value marker.

    This is deliberately kept outside the ``Found`` tree, so that
    ``Union[Missing, T]`` is never absorbed into ``T``.
    """

    name = "Missing"


Found = FoundType()
Known = KnownType()
Unknown = UnknownType()
Infinite = InfiniteType()
Continuous = ContinuousType()
Count = CountType()
Textual = TextualType()
Missing = MissingType()


def nonmissing(typ: ScientificType) -> ScientificType:
    """Strip ``Missing`` from a union of scitypes.

    Examples
    --------
    .. doctest::

        >>> nonmissing(Union(Count, Missing))
        Count
        >>> nonmissing(Continuous)
        Continuous
    """
    if isinstance(typ, CompositeType):
        return Union(*(t for t in typ.members if t != Missing))
    if typ == Missing:
        return Union()  # empty
    return typ


def has_missing(typ: ScientificType) -> bool:
    """Check whether a scitype admits the missing-value marker."""
    if isinstance(typ, CompositeType):
        return Missing in typ.members
    return typ == Missing
