"""This module describes the base classes of the ``scitypes`` type system.

Classes
-------
ScientificType
    Base unit of the type system.  Each subclass is a node in the scitype
    tree, and the Python class hierarchy *is* the scitype hierarchy.

CompositeType
    A set-like union of scitypes, which participates in subtype checks as a
    first-class type.

Functions
---------
Union
    Construct a normalized :class:`CompositeType`.

issubtype
    The subtype relation over scitypes and unions of scitypes.
"""
from __future__ import annotations
import numbers
import operator
from typing import Any, Iterable, Iterator


######################
####    PUBLIC    ####
######################


def issubtype(
    left: ScientificType,
    right: ScientificType
) -> bool:
    """Check whether one scitype is a subtype of another.

    Parameters
    ----------
    left : ScientificType
        The candidate subtype.  This can be a :class:`CompositeType`, in which
        case every member must be a subtype of ``right``.
    right : ScientificType
        The candidate supertype.  If this is a :class:`CompositeType`, then
        ``left`` must be a subtype of at least one of its members.

    Returns
    -------
    bool
        ``True`` if ``left`` is a subtype of ``right``.  The relation is
        reflexive and transitive.

    Notes
    -----
    Outside of unions, a type is a subtype of another if it is an instance of
    the other's class and the other's parameters admit its own.
    Unparameterized types admit any parameters.

    Examples
    --------
    .. doctest::

        >>> issubtype(Multiclass(3), Finite)
        True
        >>> issubtype(Multiclass(3), Finite(5))
        False
        >>> issubtype(Union(Count, Missing), Union(Infinite, Missing))
        True
    """
    if isinstance(left, CompositeType):
        return all(issubtype(member, right) for member in left.members)
    if isinstance(right, CompositeType):
        return any(issubtype(left, member) for member in right.members)
    if not isinstance(left, type(right)):
        return False
    return right.admits(left)


def Union(*types: ScientificType) -> ScientificType:
    """Construct a union of scitypes.

    Parameters
    ----------
    *types : ScientificType
        The types to combine.  Nested unions are flattened.

    Returns
    -------
    ScientificType
        A :class:`CompositeType` containing the given types.  Duplicates are
        removed and any member that is a subtype of another member is absorbed
        into it.  If only one type remains, it is returned directly.

    Examples
    --------
    .. doctest::

        >>> Union(Count, Missing)
        Union[Count, Missing]
        >>> Union(Multiclass(3), Finite)
        Finite
        >>> Union(Continuous)
        Continuous
    """
    # pylint: disable=invalid-name
    flat = []
    for typ in types:
        if isinstance(typ, CompositeType):
            flat.extend(typ.members)
        elif isinstance(typ, ScientificType):
            flat.append(typ)
        else:
            raise TypeError(f"expected a ScientificType, not {repr(typ)}")

    unique = list(dict.fromkeys(flat))
    kept = [
        typ for typ in unique
        if not any(
            other != typ and issubtype(typ, other) for other in unique
        )
    ]
    if len(kept) == 1:
        return kept[0]
    return CompositeType(kept)


#######################
####    CLASSES    ####
#######################


class ScientificType:
    """Base class for every node in the scitype hierarchy.

    Parameters
    ----------
    *parameters : Any
        Arity parameters for parametric types, as named by the
        :attr:`parameter_names` class attribute.  If these are omitted, the
        type is left unparameterized, which admits any arity during subtype
        checks.

    Notes
    -----
    Instances are immutable and hashable.  Subclasses describe their
    parameters by overriding ``parameter_names`` and, optionally,
    ``validate_parameters()`` and ``admits_parameters()``.
    """

    __slots__ = ("_parameters",)

    name: str = "Scientific"
    parameter_names: tuple[str, ...] = ()

    def __init__(self, *parameters: Any):
        if parameters:
            if not self.parameter_names:
                raise TypeError(f"{self.name} is not a parametric type")
            parameters = self.validate_parameters(*parameters)
        else:
            parameters = None
        object.__setattr__(self, "_parameters", parameters)

    ##########################
    ####    PARAMETERS    ####
    ##########################

    @property
    def parameters(self) -> tuple | None:
        """The arity parameters of this type, or ``None`` if it is
        unparameterized.
        """
        return self._parameters

    @property
    def is_parametric(self) -> bool:
        """Indicates whether this type family carries arity parameters."""
        return bool(self.parameter_names)

    def validate_parameters(self, *parameters: Any) -> tuple:
        """Check the parameters passed to the constructor and return them in
        canonical form.
        """
        if len(parameters) != len(self.parameter_names):
            raise TypeError(
                f"{self.name} expects {len(self.parameter_names)} "
                f"parameter(s) {self.parameter_names}, got {len(parameters)}"
            )
        return tuple(parameters)

    def admits(self, other: ScientificType) -> bool:
        """Check whether the parameters of this type admit those of an
        instance of the same family.
        """
        if self._parameters is None:
            return True
        if other._parameters is None:
            return False
        return self.admits_parameters(other._parameters)

    def admits_parameters(self, parameters: tuple) -> bool:
        """Compare concrete parameters.  Exact equality unless overridden."""
        return parameters == self._parameters

    ##########################
    ####    HIERARCHY     ####
    ##########################

    @property
    def supertype(self) -> ScientificType | None:
        """The unparameterized parent of this type, or ``None`` at the top of
        the tree.
        """
        parent = type(self).__bases__[0]
        if parent is ScientificType:
            return None
        return parent()

    @property
    def subtypes(self) -> list[ScientificType]:
        """The unparameterized direct children of this type."""
        return [cls() for cls in type(self).__subclasses__()]

    def contains(self, other: ScientificType) -> bool:
        """Check whether ``other`` is a subtype of this type."""
        return issubtype(other, self)

    #############################
    ####    SPECIAL METHODS    ####
    #############################

    def __call__(self, *parameters: Any) -> ScientificType:
        """Specialize an unparameterized type."""
        if not self.parameter_names:
            raise TypeError(f"{self.name} is not a parametric type")
        if self._parameters is not None:
            raise TypeError(f"{self} is already parameterized")
        return type(self)(*parameters)

    def __getitem__(self, key: Any) -> ScientificType:
        """Bracket syntax for specialization, e.g. ``Multiclass[3]``."""
        if isinstance(key, tuple):
            return self(*key)
        return self(key)

    def __contains__(self, other: ScientificType) -> bool:
        return self.contains(other)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        return (
            type(self) is type(other) and
            self._parameters == other._parameters
        )

    def __hash__(self) -> int:
        return hash((type(self), self._parameters))

    def __reduce__(self) -> tuple:
        return (type(self), self._parameters or ())

    def __repr__(self) -> str:
        if self._parameters is None:
            return self.name
        return f"{self.name}[{', '.join(str(p) for p in self._parameters)}]"


class CompositeType(ScientificType):
    """A set-like union of scitypes.

    Parameters
    ----------
    members : Iterable[ScientificType]
        The types contained in this union.  These should not be unions
        themselves; use :func:`Union` to build normalized instances.

    Notes
    -----
    Composite types sit outside the scitype tree.  They are never the result
    of classifying a scalar, but arise whenever the elements of a sequence
    have more than one scitype (``Union[Count, Missing]``) and when building
    supertypes for subtype queries.
    """

    __slots__ = ("members",)

    name = "Union"

    def __init__(self, members: Iterable[ScientificType] = ()):
        super().__init__()
        object.__setattr__(self, "members", frozenset(members))

    @property
    def supertype(self) -> None:
        return None

    @property
    def subtypes(self) -> list[ScientificType]:
        return list(self)

    def __call__(self, *parameters: Any) -> ScientificType:
        raise TypeError("unions cannot be parameterized")

    def __iter__(self) -> Iterator[ScientificType]:
        return iter(sorted(self.members, key=str))

    def __len__(self) -> int:
        return len(self.members)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, CompositeType) and
            self.members == other.members
        )

    def __hash__(self) -> int:
        return hash((CompositeType, self.members))

    def __reduce__(self) -> tuple:
        return (CompositeType, (tuple(self.members),))

    def __repr__(self) -> str:
        return f"Union[{', '.join(str(t) for t in self)}]"


#######################
####    PRIVATE    ####
#######################


def as_dimension(val: Any, name: str, minimum: int = 1) -> int:
    """Validate an integer arity parameter."""
    if isinstance(val, bool) or not isinstance(val, numbers.Integral):
        raise TypeError(f"{name} must be an integer, not {repr(val)}")
    val = operator.index(val)
    if val < minimum:
        raise ValueError(f"{name} must be >= {minimum}, not {val}")
    return val


def as_scitype(val: Any, name: str) -> ScientificType:
    """Validate a type parameter."""
    if not isinstance(val, ScientificType):
        raise TypeError(f"{name} must be a ScientificType, not {repr(val)}")
    return val
