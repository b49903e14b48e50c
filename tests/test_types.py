from __future__ import annotations
import pickle

import pytest

from scitypes import (
    Array, Binary, ColorImage, CompositeType, Continuous, Count, Finite,
    Found, GrayImage, Image, Infinite, Known, Missing, Multiclass,
    OrderedFactor, Scientific, Table, Textual, Tuple, Union, Unknown,
    has_missing, issubtype, nonmissing, tree
)


####################
####    DATA    ####
####################


subtypes = [
    (Continuous, Infinite),
    (Count, Infinite),
    (Count, Known),
    (Count, Found),
    (Unknown, Found),
    (Textual, Known),
    (Multiclass(3), Finite),
    (Multiclass(3), Finite(3)),
    (OrderedFactor(3), Finite),
    (Multiclass(2), Binary),
    (GrayImage(64, 32), Image),
    (GrayImage(64, 32), Image(64, 32)),
    (Missing, Scientific),
    (Count, Scientific),
    (Union(Count, Missing), Union(Infinite, Missing)),
    (Array(Count), Array(Infinite)),
    (Array(Count, 2), Array(Count, None)),
    (Array(Union(Count, Missing)), Array(Scientific)),
    (Tuple(Count, Continuous), Tuple(Infinite, Infinite)),
    (Table(Continuous, Multiclass(3)), Table(Continuous, Finite)),
    (Table(Continuous), Table),
]


not_subtypes = [
    (Infinite, Continuous),
    (Multiclass(3), Finite(5)),
    (Finite, Finite(3)),
    (OrderedFactor(3), Multiclass),
    (Missing, Found),
    (Union(Count, Missing), Count),
    (GrayImage(64, 32), ColorImage),
    (GrayImage(64, 32), Image(32, 64)),
    (Array(Count, 2), Array(Count)),
    (Array(Continuous), Array(Count)),
    (Tuple(Count), Tuple(Count, Count)),
    (Table(Continuous, Textual), Table(Continuous)),
]


#####################
####    TESTS    ####
#####################


@pytest.mark.parametrize("left, right", subtypes)
def test_issubtype_accepts_subtypes(left, right):
    assert issubtype(left, right)
    assert left in right
    assert right.contains(left)


@pytest.mark.parametrize("left, right", not_subtypes)
def test_issubtype_rejects_non_subtypes(left, right):
    assert not issubtype(left, right)
    assert left not in right


@pytest.mark.parametrize("typ", [
    Count, Multiclass(3), Union(Count, Missing), Array(Textual),
    Table(Continuous), Tuple(Count, Missing)
])
def test_issubtype_is_reflexive(typ):
    assert issubtype(typ, typ)


def test_issubtype_is_transitive():
    assert issubtype(Multiclass(3), Finite(3))
    assert issubtype(Finite(3), Known)
    assert issubtype(Multiclass(3), Known)


def test_union_is_normalized():
    assert Union(Count, Missing) == Union(Missing, Count)
    assert Union(Union(Count, Missing), Continuous) == Union(
        Count, Missing, Continuous
    )
    assert Union(Count, Count) == Count
    assert Union(Multiclass(3), Finite) == Finite
    assert Union(Continuous) is Continuous
    assert len(Union(Count, Missing, Textual)) == 3


def test_union_repr_is_sorted():
    assert repr(Union(Missing, Count)) == "Union[Count, Missing]"


def test_empty_union_is_composite():
    empty = Union()
    assert isinstance(empty, CompositeType)
    assert len(empty) == 0


def test_parametric_types_repr():
    assert repr(Multiclass(3)) == "Multiclass[3]"
    assert repr(GrayImage(64, 32)) == "GrayImage[64, 32]"
    assert repr(Array(Count)) == "Array[Count]"
    assert repr(Array(Count, 2)) == "Array[Count, 2]"
    assert repr(Finite) == "Finite"


def test_bracket_syntax_matches_call_syntax():
    assert Multiclass[3] == Multiclass(3)
    assert GrayImage[28, 28] == GrayImage(28, 28)


def test_aliases():
    assert Binary == Finite(2)
    assert Scientific == Union(Missing, Found)


@pytest.mark.parametrize("factory, error", [
    (lambda: Count(3), TypeError),
    (lambda: Multiclass(3)(4), TypeError),
    (lambda: Finite(-1), ValueError),
    (lambda: Finite(True), TypeError),
    (lambda: Finite(2.5), TypeError),
    (lambda: Image(0, 4), ValueError),
    (lambda: Image(4), TypeError),
    (lambda: Array(3), TypeError),
    (lambda: Union(Count, 3), TypeError),
])
def test_invalid_parameters_are_rejected(factory, error):
    with pytest.raises(error):
        factory()


def test_types_are_immutable():
    with pytest.raises(AttributeError):
        Multiclass(3).foo = 1


def test_types_are_hashable():
    assert len({Count, Count, Multiclass(3), Multiclass(3)}) == 2
    assert Multiclass(3) != Multiclass(4)
    assert Multiclass(3) != OrderedFactor(3)


@pytest.mark.parametrize("typ", [
    Count, Multiclass(3), Array(Union(Count, Missing)), Table(Continuous),
    Union(Count, Missing)
])
def test_types_can_be_pickled(typ):
    assert pickle.loads(pickle.dumps(typ)) == typ


def test_supertype():
    assert Multiclass(3).supertype == Finite
    assert Continuous.supertype == Infinite
    assert Known.supertype == Found
    assert Found.supertype is None
    assert Missing.supertype is None


def test_subtypes():
    assert set(Infinite.subtypes) == {Continuous, Count}
    assert set(Finite.subtypes) == {Multiclass, OrderedFactor}


def test_parameters():
    assert Multiclass(3).parameters == (3,)
    assert Multiclass.parameters is None
    assert Multiclass.is_parametric
    assert not Count.is_parametric
    assert Multiclass(3).n_levels == 3
    assert GrayImage(64, 32).width == 64
    assert GrayImage(64, 32).height == 32


def test_table_call_builds_column_union():
    assert Table(Continuous, Finite) == Table[
        Union(Array(Continuous), Array(Finite))
    ]


def test_nonmissing():
    assert nonmissing(Union(Count, Missing)) == Count
    assert nonmissing(Continuous) == Continuous
    assert nonmissing(Union(Count, Textual, Missing)) == Union(Count, Textual)
    assert len(nonmissing(Missing)) == 0


def test_has_missing():
    assert has_missing(Union(Count, Missing))
    assert has_missing(Missing)
    assert not has_missing(Count)


def test_tree():
    assert tree(Infinite) == "Infinite\n├── Continuous\n└── Count"
    rendered = tree()
    assert rendered.startswith("Found")
    for name in ("Known", "Unknown", "Multiclass", "GrayImage", "Table"):
        assert name in rendered
    assert "Missing" not in rendered
