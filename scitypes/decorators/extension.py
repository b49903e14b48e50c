"""This module describes the ``@extension_func`` decorator, which gives a
function managed keyword arguments.

A managed argument has a validator and a process-wide default that can be
changed without touching the function itself:

.. doctest::

    >>> coerce.errors
    'raise'
    >>> coerce.errors = "warn"      # validated, then stored as the default
    >>> coerce.settings
    mappingproxy({'errors': 'warn', 'verbosity': 1})
    >>> del coerce.errors           # back to the hardcoded default
    >>> coerce.reset_defaults()     # same, for every managed argument
"""
from __future__ import annotations
from functools import wraps
import inspect
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .base import FunctionDecorator


# marks an argument that has no default
EMPTY = inspect.Parameter.empty


def extension_func(func: Callable) -> ExtensionFunc:
    """Wrap a function so that its arguments can be managed.

    Each wrapped function gets a private :class:`ExtensionFunc` subclass,
    since managed arguments are installed as properties on the class.
    """

    class _ExtensionFunc(ExtensionFunc):
        pass

    return _ExtensionFunc(func)


class ExtensionFunc(FunctionDecorator):
    """A function whose keyword arguments carry validators and adjustable
    defaults.

    Parameters
    ----------
    func : Callable
        The function to wrap.  Every managed argument must appear in its
        signature.

    Notes
    -----
    Arguments passed explicitly are validated on every call.  Defaults are
    validated once, when they are assigned, and stored in the function's
    signature.  ``_hardcoded`` remembers the values that ``del`` and
    :meth:`reset_defaults` restore.
    """

    _reserved = FunctionDecorator._reserved | {
        "_signature", "_validators", "_hardcoded"
    }

    def __init__(self, func: Callable):
        super().__init__(func)
        self._signature = inspect.signature(func)
        self._validators = {}
        self._hardcoded = {}

    @property
    def settings(self) -> Mapping[str, Any]:
        """The current default of every managed argument that has one."""
        params = self._signature.parameters
        return MappingProxyType({
            name: params[name].default for name in self._validators
            if params[name].default is not EMPTY
        })

    def argument(
        self,
        func: Callable | None = None,
        *,
        default: Any = EMPTY
    ) -> Callable:
        """Register a validator as a managed argument of the same name.

        Parameters
        ----------
        func : Callable
            A validator of the form ``validator(val, context) -> val``, where
            ``context`` maps the other arguments of the current call to their
            values.  It should raise ``TypeError`` or ``ValueError`` for bad
            input and return the normalized value otherwise.
        default : Any, optional
            The hardcoded default.  If omitted, the default from the wrapped
            function's signature is used.  Either way, it is validated
            immediately.

        Raises
        ------
        TypeError
            If the validator takes fewer than two arguments or the wrapped
            function has no argument with the validator's name.
        KeyError
            If the argument is already managed.

        Examples
        --------
        This is how ``coerce()`` declares its ``verbosity`` argument:

        .. code:: python

            @coerce.argument(default=1)
            def verbosity(val: int, context: dict) -> int:
                if val < 0:
                    raise ValueError("`verbosity` must be non-negative")
                return int(val)
        """
        if func is None:
            return lambda validator: self.argument(validator, default=default)

        name = func.__name__
        if len(inspect.signature(func).parameters) < 2:
            raise TypeError(
                f"validator '{name}' must accept (val, context) arguments"
            )
        if name in self._validators:
            raise KeyError(f"argument '{name}' is already managed")
        if name not in self._signature.parameters:
            raise TypeError(
                f"'{self.__qualname__}()' has no argument '{name}'"
            )

        @wraps(func)
        def validator(val: Any, context: dict | None = None) -> Any:
            if context is None:
                context = dict(self.settings)
            return func(val, context)

        if default is EMPTY:
            default = self._signature.parameters[name].default
        if default is not EMPTY:
            default = validator(default)

        self._validators[name] = validator
        self._hardcoded[name] = default
        self._set_default(name, default)
        setattr(type(self), name, self._managed_property(name))
        return validator

    def reset_defaults(self) -> None:
        """Restore the hardcoded default of every managed argument."""
        for name, default in self._hardcoded.items():
            self._set_default(name, default)

    def _set_default(self, name: str, value: Any) -> None:
        params = [
            par.replace(default=value) if par.name == name else par
            for par in self._signature.parameters.values()
        ]
        self._signature = self._signature.replace(parameters=params)

    def _managed_property(self, name: str) -> property:
        validator = self._validators[name]

        def fget(self) -> Any:
            value = self._signature.parameters[name].default
            if value is EMPTY:
                raise TypeError(f"'{name}' has no default value")
            return value

        def fset(self, value: Any) -> None:
            self._set_default(name, validator(value))

        def fdel(self) -> None:
            self._set_default(name, self._hardcoded[name])

        return property(fget, fset, fdel, doc=validator.__doc__)

    def __call__(self, *args, **kwargs) -> Any:
        bound = self._signature.bind(*args, **kwargs)
        explicit = [n for n in bound.arguments if n in self._validators]
        bound.apply_defaults()

        context = dict(bound.arguments)
        for name in explicit:
            bound.arguments[name] = self._validators[name](
                bound.arguments[name],
                context
            )
        return self.__wrapped__(*bound.args, **bound.kwargs)

    def __repr__(self) -> str:
        return f"{self.__qualname__}{self._signature}"
