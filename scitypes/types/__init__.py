"""This package defines the structure and contents of the ``scitypes`` type
system.

The scitype tree is a strict hierarchy rooted at ``Found``::

    Found
    ├── Known
    │   ├── Finite[N]
    │   │   ├── Multiclass[N]
    │   │   └── OrderedFactor[N]
    │   ├── Infinite
    │   │   ├── Continuous
    │   │   └── Count
    │   ├── Image[W, H]
    │   │   ├── GrayImage[W, H]
    │   │   └── ColorImage[W, H]
    │   ├── Table[K]
    │   └── Textual
    └── Unknown

``Missing`` sits beside the tree, and ``Scientific = Union[Missing, Found]``.
Containers are described by ``Tuple[T1, ..., Tn]`` and ``Array[U]``.

Base Classes
------------
ScientificType
    Base unit of the ``scitypes`` type system.  Each subclass is a node in the
    tree above.

CompositeType
    A set-like union of types, which participates in subtype checks as a
    first-class type.

Functions
---------
Union
    Construct a normalized union of types.

issubtype
    The subtype relation.

nonmissing
    Remove ``Missing`` from a union.

tree
    Render the scitype hierarchy as text.
"""
from .base import CompositeType, ScientificType, Union, issubtype
from .scalar import (
    ContinuousType, CountType, FoundType, InfiniteType, KnownType,
    MissingType, TextualType, UnknownType, Continuous, Count, Found,
    Infinite, Known, Missing, Textual, Unknown, has_missing, nonmissing
)
from .finite import (
    FiniteType, MulticlassType, OrderedFactorType, Binary, Finite,
    Multiclass, OrderedFactor
)
from .image import (
    ColorImageType, GrayImageType, ImageType, ColorImage, GrayImage, Image
)
from .container import (
    ArrayType, TableType, TupleType, Array, Table, Tuple
)


# aliases
Scientific = Union(Missing, Found)


def tree(root: ScientificType = Found) -> str:
    """Render the scitype hierarchy below ``root`` as indented text.

    Examples
    --------
    .. doctest::

        >>> print(tree(Infinite))
        Infinite
        ├── Continuous
        └── Count
    """
    lines = [str(root)]

    def walk(node: ScientificType, prefix: str) -> None:
        children = sorted(node.subtypes, key=str)
        for i, child in enumerate(children):
            last = i == len(children) - 1
            lines.append(f"{prefix}{'└── ' if last else '├── '}{child}")
            walk(child, prefix + ("    " if last else "│   "))

    walk(root, "")
    return "\n".join(lines)
