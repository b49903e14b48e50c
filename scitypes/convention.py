"""This module describes conventions, which articulate what scientific type
each native value represents, and the registry that tracks which convention
is active.

Classes
-------
Convention
    A named strategy mapping native value shapes to scitypes and scitypes to
    coercion procedures.

ConventionRegistry
    An append-only collection of conventions with exactly one active member.
"""
from __future__ import annotations
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

import pandas as pd

from scitypes import types
from scitypes.util.error import (
    DuplicateConventionError, UnknownConventionError
)


# classify(value, shape) -> ScientificType | None
classifier = Callable[[Any, Any], "types.ScientificType | None"]


# procedure(series, target) -> pd.Series
procedure = Callable[[pd.Series, types.ScientificType], pd.Series]


class Convention:
    """A swappable strategy for interpreting native values.

    Parameters
    ----------
    name : str
        A unique name for this convention.
    classify : Callable
        A function ``classify(value, shape)`` that accepts a scalar and its
        :class:`Shape <scitypes.shapes.Shape>` and returns a scitype, or
        ``None`` if the convention has no rule for it.
    coercions : Mapping, optional
        A map from :class:`ScientificType <scitypes.ScientificType>`
        subclasses to procedures ``procedure(series, target) -> pd.Series``
        that convert a series to the target scitype.
    classify_dtype : Callable, optional
        A vectorized fast path ``classify_dtype(dtype)`` that returns the
        element scitype shared by every non-missing value of an array with
        the given dtype, or ``None`` if the array must be scanned
        elementwise.
    base : Convention, optional
        A convention to defer to whenever this one has no rule.

    Notes
    -----
    Conventions never store per-value state.  Switching the active convention
    does not affect scitypes that were computed before the switch.
    """

    def __init__(
        self,
        name: str,
        classify: classifier,
        coercions: Mapping[type, procedure] | None = None,
        classify_dtype: Callable[[Any], Any] | None = None,
        base: Convention | None = None
    ):
        if not isinstance(name, str) or not name:
            raise TypeError(f"convention name must be a string: {repr(name)}")
        if not callable(classify):
            raise TypeError(f"classify must be callable: {repr(classify)}")

        self.name = name
        self.base = base
        self._classify = classify
        self._classify_dtype = classify_dtype
        self._coercions = {}
        for key, func in (coercions or {}).items():
            if not (isinstance(key, type) and issubclass(key, types.ScientificType)):
                raise TypeError(
                    f"coercion keys must be ScientificType subclasses, not "
                    f"{repr(key)}"
                )
            if not callable(func):
                raise TypeError(f"coercion for {key.name} must be callable")
            self._coercions[key] = func

    @property
    def coercions(self) -> Mapping[type, procedure]:
        """A read-only view of the coercion procedures defined by this
        convention and its bases.
        """
        result = {}
        if self.base is not None:
            result.update(self.base.coercions)
        result.update(self._coercions)
        return MappingProxyType(result)

    def classify(self, value: Any, shape: Any) -> types.ScientificType | None:
        """Apply this convention's scalar rules."""
        result = self._classify(value, shape)
        if result is None and self.base is not None:
            return self.base.classify(value, shape)
        return result

    def classify_dtype(self, dtype: Any) -> types.ScientificType | None:
        """Apply this convention's vectorized rules, if any."""
        result = None
        if self._classify_dtype is not None:
            result = self._classify_dtype(dtype)
        if result is None and self.base is not None:
            return self.base.classify_dtype(dtype)
        return result

    def coercion(self, target: types.ScientificType) -> procedure | None:
        """Find the most specific procedure that converts to ``target``.

        The search walks up the scitype tree from ``type(target)``, so a
        procedure registered for ``FiniteType`` also handles ``Multiclass``
        and ``OrderedFactor`` targets.
        """
        table = self.coercions
        for cls in type(target).__mro__:
            if cls in table:
                return table[cls]
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({repr(self.name)})"


class ConventionRegistry:
    """An append-only registry of conventions with one active member.

    Parameters
    ----------
    default : Convention
        The baseline convention, which is registered immediately and is active
        until another convention is activated.

    Notes
    -----
    The module-level :data:`registry <scitypes.conventions.registry>` is a
    default singleton used by top-level calls.  Tests and libraries can build
    isolated registries and pass their conventions explicitly.

    Registries are not thread-safe.  Callers that activate conventions from
    multiple threads must serialize those changes themselves.

    Examples
    --------
    .. doctest::

        >>> reg = ConventionRegistry(baseline)
        >>> reg.current
        Convention('baseline')
        >>> reg.register("strict", lambda value, shape: None, base=baseline)
        Convention('strict')
        >>> reg.activate("strict")
        Convention('strict')
        >>> reg.reset()
        >>> reg.current
        Convention('baseline')
    """

    def __init__(self, default: Convention):
        self._conventions = {}
        self.add(default)
        self.default = default
        self._active = default

    @property
    def current(self) -> Convention:
        """The active convention."""
        return self._active

    @property
    def names(self) -> tuple[str, ...]:
        """The names of every registered convention, in registration order."""
        return tuple(self._conventions)

    def add(self, convention: Convention) -> Convention:
        """Register a pre-built :class:`Convention`.

        Raises
        ------
        DuplicateConventionError
            If a convention of the same name is already registered.
        """
        if not isinstance(convention, Convention):
            raise TypeError(f"expected a Convention, not {repr(convention)}")
        if convention.name in self._conventions:
            raise DuplicateConventionError(
                f"convention '{convention.name}' is already registered"
            )
        self._conventions[convention.name] = convention
        return convention

    def register(
        self,
        name: str,
        classify: classifier,
        coercions: Mapping[type, procedure] | None = None,
        *,
        classify_dtype: Callable[[Any], Any] | None = None,
        base: Convention | str | None = None
    ) -> Convention:
        """Create and register a new convention.

        Parameters
        ----------
        name : str
            The name of the convention.  This must be unique.
        classify : Callable
            Scalar rules, as described in :class:`Convention`.
        coercions : Mapping, optional
            Coercion procedures keyed by scitype class.
        classify_dtype : Callable, optional
            Vectorized rules keyed on array dtype.
        base : Convention | str, optional
            A convention (or the name of a registered convention) to defer to
            when the new one has no rule.

        Returns
        -------
        Convention
            The registered convention.  It is not activated.

        Raises
        ------
        DuplicateConventionError
            If ``name`` is already registered.
        UnknownConventionError
            If ``base`` is given by name and is not registered.
        """
        if name in self._conventions:
            raise DuplicateConventionError(
                f"convention '{name}' is already registered"
            )
        if isinstance(base, str):
            base = self[base]
        return self.add(Convention(
            name,
            classify,
            coercions=coercions,
            classify_dtype=classify_dtype,
            base=base
        ))

    def activate(self, name: str) -> Convention:
        """Make a registered convention the active one.

        Raises
        ------
        UnknownConventionError
            If no convention is registered under ``name``.
        """
        self._active = self[name]
        return self._active

    def reset(self) -> None:
        """Reactivate the default convention."""
        self._active = self.default

    @contextmanager
    def using(self, name: str) -> Iterator[Convention]:
        """Activate a convention for the duration of a ``with`` block."""
        previous = self._active
        try:
            yield self.activate(name)
        finally:
            self._active = previous

    def __getitem__(self, name: str) -> Convention:
        try:
            return self._conventions[name]
        except KeyError:
            raise UnknownConventionError(
                f"no convention named '{name}' (registered: "
                f"{list(self._conventions)})"
            ) from None

    def __contains__(self, name: str) -> bool:
        return name in self._conventions

    def __iter__(self) -> Iterator[Convention]:
        return iter(self._conventions.values())

    def __len__(self) -> int:
        return len(self._conventions)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(active={repr(self._active.name)}, "
            f"registered={list(self._conventions)})"
        )
