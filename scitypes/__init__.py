"""Scientific types for in-memory data.

Subpackages
-----------
conventions
    Built-in conventions and the default convention registry.

convert
    Coercion procedures and the ``coerce()`` engine.

decorators
    Cooperative decorators with managed arguments.

types
    Defines the structure and contents of the scitype tree.

util
    Utilities for ``scitypes``-related functionality.

Modules
-------
autotype
    Heuristic, rule-based suggestions of scitypes for table columns.

check
    Fast type checks within the ``scitypes`` type system.

convention
    Swappable strategies for interpreting native values.

detect
    Classification of arbitrary values into the scitype tree.

resolve
    Easy construction of scitypes from type specifiers, including a
    domain-specific mini-language for referring to types by name.

schema
    Column-level summaries of tables.

shapes
    The closed set of native value shapes that conventions dispatch on.
"""
from .types import (
    ScientificType, CompositeType, Union, issubtype, nonmissing, has_missing,
    tree, FoundType, KnownType, UnknownType, InfiniteType, ContinuousType,
    CountType, TextualType, MissingType, FiniteType, MulticlassType,
    OrderedFactorType, ImageType, GrayImageType, ColorImageType, TupleType,
    ArrayType, TableType, Found, Known, Unknown, Infinite, Continuous, Count,
    Textual, Missing, Finite, Multiclass, OrderedFactor, Binary, Image,
    GrayImage, ColorImage, Tuple, Array, Table, Scientific
)
from .resolve import resolve_type
from .shapes import Shape, shape_of
from .convention import Convention, ConventionRegistry
from .conventions import (
    registry, baseline, register_convention, activate_convention,
    current_convention, reset_convention
)
from .detect import scitype, classify, elscitype
from .convert import categorize, decategorize
from .convert.base import coerce
from .convert import arguments as _arguments  # registers managed arguments
from .decorators.extension import extension_func, ExtensionFunc
from .schema import Schema, schema
from .autotype import autotype, register_rule
from .check import is_subtype, typecheck
from .util.categorical import CategoricalValue
from .util.error import (
    ScitypeError, ConventionError, UnknownConventionError,
    DuplicateConventionError, NotATableError, CoercionError,
    LevelCountMismatchError, NonIntegralValueError, UnsupportedCoercionError,
    UnknownRuleError
)
