"""This package holds the built-in conventions and the default
:class:`ConventionRegistry <scitypes.ConventionRegistry>` singleton used by
top-level calls.
"""
from __future__ import annotations
from typing import Any, Callable, Mapping

from scitypes.convention import Convention, ConventionRegistry

from .baseline import baseline


registry = ConventionRegistry(baseline)


def current_convention() -> Convention:
    """Get the active convention of the default registry."""
    return registry.current


def register_convention(
    name: str,
    classify: Callable,
    coercions: Mapping[type, Callable] | None = None,
    *,
    classify_dtype: Callable[[Any], Any] | None = None,
    base: Convention | str | None = "baseline"
) -> Convention:
    """Register a new convention with the default registry.

    Unlike :meth:`ConventionRegistry.register`, new conventions defer to the
    baseline convention unless ``base=None`` is given explicitly.

    Examples
    --------
    .. doctest::

        >>> def classify(value, shape):
        ...     if shape is Shape.INTEGRAL and value < 0:
        ...         return Continuous
        ...     return None

        >>> register_convention("signed", classify)
        Convention('signed')
        >>> with registry.using("signed"):
        ...     scitype(-1)
        Continuous
        >>> scitype(-1)
        Count
    """
    return registry.register(
        name,
        classify,
        coercions,
        classify_dtype=classify_dtype,
        base=base
    )


def activate_convention(name: str) -> Convention:
    """Activate a registered convention in the default registry."""
    return registry.activate(name)


def reset_convention() -> None:
    """Reactivate the baseline convention in the default registry."""
    registry.reset()
