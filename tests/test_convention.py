from __future__ import annotations

import pytest

import scitypes
from scitypes import (
    Continuous, Convention, ConventionRegistry, Count, DuplicateConventionError,
    Multiclass, ScitypeError, Shape, Textual, Unknown, UnknownConventionError,
    baseline, scitype
)
from scitypes.convert import to_finite


####################
####    DATA    ####
####################


def signed(value, shape):
    """Negative integers are measurements."""
    if shape is Shape.INTEGRAL and value < 0:
        return Continuous
    return None


def everything_textual(value, shape):
    return Textual


#####################
####    TESTS    ####
#####################


def test_registry_starts_with_default_active():
    reg = ConventionRegistry(baseline)
    assert reg.current is baseline
    assert reg.names == ("baseline",)
    assert "baseline" in reg
    assert len(reg) == 1


def test_register_adds_without_activating():
    reg = ConventionRegistry(baseline)
    conv = reg.register("signed", signed, base="baseline")
    assert isinstance(conv, Convention)
    assert reg.names == ("baseline", "signed")
    assert reg.current is baseline


def test_register_rejects_duplicate_names():
    reg = ConventionRegistry(baseline)
    reg.register("signed", signed)
    with pytest.raises(DuplicateConventionError) as err:
        reg.register("signed", signed)
    assert isinstance(err.value, KeyError)
    assert isinstance(err.value, ScitypeError)
    assert str(err.value) == "convention 'signed' is already registered"


def test_activate_rejects_unknown_names():
    reg = ConventionRegistry(baseline)
    with pytest.raises(UnknownConventionError):
        reg.activate("missing")
    assert reg.current is baseline


def test_register_rejects_unknown_base():
    reg = ConventionRegistry(baseline)
    with pytest.raises(UnknownConventionError):
        reg.register("signed", signed, base="nope")


def test_activate_and_reset():
    reg = ConventionRegistry(baseline)
    conv = reg.register("signed", signed, base=baseline)
    assert reg.activate("signed") is conv
    assert reg.current is conv
    reg.reset()
    assert reg.current is baseline


def test_using_restores_previous_convention():
    reg = ConventionRegistry(baseline)
    conv = reg.register("signed", signed, base=baseline)
    with reg.using("signed") as active:
        assert active is conv
        assert reg.current is conv
    assert reg.current is baseline

    with pytest.raises(RuntimeError):
        with reg.using("signed"):
            raise RuntimeError()
    assert reg.current is baseline


def test_convention_defers_to_base():
    conv = Convention("signed", signed, base=baseline)
    assert scitype(-1, convention=conv) == Continuous
    assert scitype(1, convention=conv) == Count
    assert scitype("a", convention=conv) == Textual


def test_convention_without_base_falls_back_to_unknown():
    conv = Convention("signed", signed)
    assert scitype(-1, convention=conv) == Continuous
    assert scitype(1, convention=conv) == Unknown


def test_convention_overrides_base():
    conv = Convention("text", everything_textual, base=baseline)
    assert scitype(1, convention=conv) == Textual
    assert scitype(1) == Count


def test_switching_conventions_does_not_change_computed_tags():
    reg = ConventionRegistry(baseline)
    reg.register("signed", signed, base=baseline)
    before = scitype(-1, convention=reg.current)
    reg.activate("signed")
    after = scitype(-1, convention=reg.current)
    assert before == Count
    assert after == Continuous


def test_coercion_lookup_walks_the_tree():
    assert baseline.coercion(Multiclass(3)) is to_finite
    assert baseline.coercion(Unknown) is None


def test_coercions_are_inherited_and_read_only():
    conv = Convention("signed", signed, base=baseline)
    assert set(conv.coercions) == set(baseline.coercions)
    with pytest.raises(TypeError):
        conv.coercions[type(Count)] = None


@pytest.mark.parametrize("kwargs", [
    {"name": "", "classify": signed},
    {"name": "x", "classify": None},
    {"name": "x", "classify": signed, "coercions": {int: signed}},
    {"name": "x", "classify": signed, "coercions": {type(Count): 3}},
])
def test_convention_validates_arguments(kwargs):
    with pytest.raises(TypeError):
        Convention(**kwargs)


def test_module_level_registry():
    assert scitypes.current_convention() is baseline
    scitypes.register_convention("module_level_signed", signed)
    assert scitypes.activate_convention("module_level_signed").name == (
        "module_level_signed"
    )
    assert scitype(-1) == Continuous
    assert scitype(1) == Count
    scitypes.reset_convention()
    assert scitype(-1) == Count
