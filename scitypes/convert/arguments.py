"""This module holds argument validators for the ``coerce()`` extension_func.
See the API docs for ``@extension_func`` for more details.

Defaults can be changed globally by assigning to the managed attributes,
e.g. ``coerce.errors = "warn"``, and restored with ``del coerce.errors`` or
``coerce.reset_defaults()``.
"""
from __future__ import annotations
import numbers

from .base import coerce


valid_errors = ("raise", "warn", "ignore")


@coerce.argument(default="raise")
def errors(val: str, context: dict) -> str:
    """The rule to apply if/when errors are encountered during conversion.
    """
    if val not in valid_errors:
        raise ValueError(
            f"`errors` must be one of {valid_errors}, not {repr(val)}"
        )
    return val


@coerce.argument(default=1)
def verbosity(val: int, context: dict) -> int:
    """Controls whether ``coerce()`` warns about missing values."""
    if isinstance(val, bool) or not isinstance(val, numbers.Integral):
        raise TypeError(f"`verbosity` must be an integer, not {repr(val)}")
    if val < 0:
        raise ValueError(f"`verbosity` must be non-negative, not {val}")
    return int(val)
