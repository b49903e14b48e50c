"""This module describes the base class for the decorators that make up the
public ``coerce()`` pipeline.
"""
from __future__ import annotations
from functools import update_wrapper, WRAPPER_ASSIGNMENTS
from typing import Any, Callable


class FunctionDecorator:
    """A callable wrapper that forwards attribute access to the object it
    wraps.

    Parameters
    ----------
    func : Callable
        The function or decorator being wrapped.

    Notes
    -----
    ``coerce()`` is built from several layers (``columnwise``, an
    :class:`ExtensionFunc <scitypes.decorators.ExtensionFunc>` and
    ``catch_errors``).  Forwarding lets the outermost layer expose the managed
    arguments of the inner ones, so ``coerce.errors = "warn"`` reaches the
    :class:`ExtensionFunc` no matter how deeply it is nested.

    Names in ``_reserved`` and attributes defined on the decorator's own class
    are stored locally instead of being forwarded.
    """

    _reserved = set(WRAPPER_ASSIGNMENTS) | {"__wrapped__", "__dict__"}

    def __init__(self, func: Callable):
        update_wrapper(self, func, updated=())

    def __getattr__(self, name: str) -> Any:
        # __wrapped__ is missing until update_wrapper() has run
        if name == "__wrapped__":
            raise AttributeError(name)
        return getattr(self.__wrapped__, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._reserved or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            setattr(self.__wrapped__, name, value)

    def __delattr__(self, name: str) -> None:
        if hasattr(type(self), name) or name in self.__dict__:
            object.__delattr__(self, name)
        else:
            delattr(self.__wrapped__, name)

    def __call__(self, *args, **kwargs):
        return self.__wrapped__(*args, **kwargs)

    def __dir__(self) -> list:
        own = dir(type(self)) + list(self.__dict__)
        return sorted(set(own) | set(dir(self.__wrapped__)))

    def __repr__(self) -> str:
        return repr(self.__wrapped__)
