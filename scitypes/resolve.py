"""This module describes the ``resolve_type()`` function, which allows easy
construction of scitypes from type specifiers, including a domain-specific
mini-language for referring to types by name.
"""
from __future__ import annotations
import re
from typing import Any, Iterable

from scitypes import types
from scitypes.util.type_hints import type_specifier


# ignore case, underscores are optional: "OrderedFactor" == "ordered_factor"
ALIASES = {
    "binary": types.Binary,
    "scientific": types.Scientific,
    "vector": types.Array,
}


TOKEN = re.compile(r"\s*(?:(-?\d+)|([A-Za-z_][A-Za-z0-9_]*)|(\S))")


######################
####    PUBLIC    ####
######################


def resolve_type(typespec: type_specifier) -> types.ScientificType:
    """Interpret a type specifier, returning a corresponding scitype.

    Parameters
    ----------
    typespec : type specifier
        The type specifier to resolve.  This can be:

            *   A :class:`ScientificType <scitypes.ScientificType>`, which is
                returned as-is.
            *   A string in the type specification mini-language, e.g.
                ``"continuous"``, ``"multiclass[3]"``,
                ``"gray_image[28, 28]"`` or ``"union[count, missing]"``.
            *   An iterable of the above, which is resolved into a union.

    Returns
    -------
    ScientificType
        The resolved type.

    Raises
    ------
    TypeError
        If the type specifier is not of a recognized form.
    ValueError
        If a string specifier could not be parsed.

    Examples
    --------
    .. doctest::

        >>> resolve_type("continuous")
        Continuous
        >>> resolve_type("OrderedFactor[3]")
        OrderedFactor[3]
        >>> resolve_type(["count", "missing"])
        Union[Count, Missing]
    """
    if isinstance(typespec, types.ScientificType):
        return typespec
    if isinstance(typespec, str):
        return TypeParser(typespec).parse()
    if isinstance(typespec, Iterable):
        return types.Union(*(resolve_type(t) for t in typespec))
    raise TypeError(f"could not interpret type specifier: {repr(typespec)}")


def type_names() -> dict[str, types.ScientificType]:
    """Collect every registered scitype under its normalized name."""
    result = {}
    stack = [types.ScientificType]
    while stack:
        cls = stack.pop()
        stack.extend(cls.__subclasses__())
        if cls in (types.ScientificType, types.CompositeType):
            continue
        result[normalize(cls.name)] = cls()
    result.update({normalize(k): v for k, v in ALIASES.items()})
    return result


#######################
####    PRIVATE    ####
#######################


def normalize(name: str) -> str:
    """Lowercase a name and strip underscores."""
    return name.replace("_", "").lower()


def is_column_union(args: list) -> bool:
    """Check whether table arguments are already in ``Array[...]`` form."""
    if len(args) != 1:
        return False
    members = args[0]
    if not isinstance(members, types.CompositeType):
        members = [members]
    return all(isinstance(m, types.ArrayType) for m in members)


class TypeParser:
    """A recursive-descent parser for the type specification mini-language.

    Grammar::

        spec := NAME ["[" arg ("," arg)* "]"]
        arg  := spec | INTEGER | "none"
    """

    def __init__(self, text: str):
        self.text = text
        self.tokens = self.tokenize(text)
        self.pos = 0
        self.names = type_names()

    def tokenize(self, text: str) -> list[tuple[str, Any]]:
        tokens = []
        for match in TOKEN.finditer(text):
            integer, name, symbol = match.groups()
            if integer is not None:
                tokens.append(("int", int(integer)))
            elif name is not None:
                tokens.append(("name", name))
            elif symbol is not None:
                tokens.append(("symbol", symbol))
        return tokens

    def error(self, msg: str) -> ValueError:
        return ValueError(f"invalid type specifier {repr(self.text)}: {msg}")

    def peek(self) -> tuple[str, Any] | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def expect(self, symbol: str) -> None:
        token = self.peek()
        if token != ("symbol", symbol):
            raise self.error(f"expected '{symbol}'")
        self.pos += 1

    def parse(self) -> types.ScientificType:
        result = self.parse_spec()
        if self.peek() is not None:
            raise self.error(f"unexpected {repr(self.peek()[1])}")
        return result

    def parse_spec(self) -> types.ScientificType:
        token = self.peek()
        if token is None or token[0] != "name":
            raise self.error("expected a type name")
        self.pos += 1

        name = normalize(token[1])
        if self.peek() != ("symbol", "["):
            if name == "union":
                raise self.error("union requires at least one member")
            if name not in self.names:
                raise self.error(f"unknown type '{token[1]}'")
            return self.names[name]

        # parameterized
        self.expect("[")
        args = [self.parse_arg()]
        while self.peek() == ("symbol", ","):
            self.pos += 1
            args.append(self.parse_arg())
        self.expect("]")

        if name == "union":
            return types.Union(*args)
        if name not in self.names:
            raise self.error(f"unknown type '{token[1]}'")
        base = self.names[name]
        try:
            if isinstance(base, types.TableType) and is_column_union(args):
                return base[args[0]]  # Table[Union[Array[...], ...]]
            return base(*args)
        except (TypeError, ValueError) as err:
            raise self.error(str(err)) from err

    def parse_arg(self) -> Any:
        token = self.peek()
        if token is None:
            raise self.error("unexpected end of input")
        if token[0] == "int":
            self.pos += 1
            return token[1]
        if token[0] == "name" and token[1].lower() == "none":
            self.pos += 1
            return None
        return self.parse_spec()
