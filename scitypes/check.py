"""This module describes convenience functions for checking data and type
specifiers against the scitype tree.
"""
from __future__ import annotations
from typing import Any

from scitypes import types
from scitypes.convention import Convention
from scitypes.detect import scitype
from scitypes.resolve import resolve_type
from scitypes.util.type_hints import type_specifier


def is_subtype(left: type_specifier, right: type_specifier) -> bool:
    """Check whether one type specifier describes a subtype of another.

    Examples
    --------
    .. doctest::

        >>> is_subtype("multiclass[3]", "finite")
        True
        >>> is_subtype("count", ["continuous", "missing"])
        False
    """
    return types.issubtype(resolve_type(left), resolve_type(right))


def typecheck(
    data: Any,
    target: type_specifier,
    convention: Convention | None = None
) -> bool:
    """Check whether the scitype of some data is a subtype of a target.

    Examples
    --------
    .. doctest::

        >>> typecheck([1, 2, 3], "array[count]")
        True
        >>> typecheck([1, None], "array[count]")
        False
        >>> typecheck(pd.DataFrame({"x": [1.0]}), Table(Continuous))
        True
    """
    return types.issubtype(scitype(data, convention), resolve_type(target))
