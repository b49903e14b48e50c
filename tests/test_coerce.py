from __future__ import annotations
import warnings

import numpy as np
import pandas as pd
import pytest

from scitypes import (
    Continuous, Count, Finite, GrayImage, LevelCountMismatchError, Missing,
    Multiclass, NonIntegralValueError, NotATableError, OrderedFactor,
    Textual, Union, Unknown, UnsupportedCoercionError, coerce, elscitype,
    issubtype, schema
)


####################
####    DATA    ####
####################


# (data, target) pairs that are known to succeed
conversions = [
    ([1, 2, 3], Continuous),
    ([1, 2, 3], Multiclass),
    ([1, 2, 3], OrderedFactor),
    ([1, 2, 3], Textual),
    (pd.Series([1.0, 2.0, 3.0]), Count),
    (pd.Series([1.0, None, 3.0]), Count),
    (pd.Series([1.0, None, 3.0]), Continuous),
    (pd.Series([1.0, None, 3.0]), Multiclass),
    (pd.Series([1.0, None, 3.0]), OrderedFactor(2)),
    (pd.Series([1.0, None, 3.0]), Textual),
    (pd.Series(["b", "a", None]), Multiclass(2)),
    (pd.Series(["1.5", "2"]), Continuous),
    (pd.Series(["1", "2", None]), Count),
    (pd.Series([True, False]), Continuous),
    (pd.Series([True, None], dtype="boolean"), Count),
    (pd.Series([1, 2, 1], dtype="category"), Continuous),
    (pd.Series(["y", "n", "y"]), Finite(2)),
    (np.array([1, 2, 3]), Continuous),
    (pd.Categorical(["a", "b"]), OrderedFactor),
    (range(3), Multiclass(3)),
    (pd.Series([2**60, -2**60]), Continuous),
    (pd.Series([-2.0**63]), Count),
    (pd.Categorical(["a", "b", "a"], categories=["a", "b", "c"]),
     Multiclass(2)),
]


# (data, target, error) triples that are known to fail
failures = [
    (pd.Series([1.5, 2.0]), Count, NonIntegralValueError),
    (pd.Series([np.inf, 2.0]), Count, NonIntegralValueError),
    (pd.Series(["a", "b"]), Continuous, UnsupportedCoercionError),
    (pd.Series(["a", "b"]), Count, UnsupportedCoercionError),
    (pd.Series([2**53 + 1]), Continuous, UnsupportedCoercionError),
    (pd.Series([2.0**63]), Count, UnsupportedCoercionError),
    (pd.Series([-2.0**64]), Count, UnsupportedCoercionError),
    (pd.Series(["a", "b"], dtype="category"), Continuous,
     UnsupportedCoercionError),
    (pd.Series([1, 2]), Multiclass(3), LevelCountMismatchError),
    (pd.Series([1, 2]), Unknown, UnsupportedCoercionError),
    (pd.Series([1, 2]), GrayImage, UnsupportedCoercionError),
    (pd.Series(["a"]), Union(Continuous, Count), UnsupportedCoercionError),
    (pd.Series([1 + 2j]), Continuous, UnsupportedCoercionError),
]


#####################
####    TESTS    ####
#####################


@pytest.mark.parametrize("data, target", conversions)
def test_coerce_result_conforms_to_target(data, target):
    result = coerce(data, target, verbosity=0)
    assert isinstance(result, pd.Series)
    assert issubtype(elscitype(result), Union(target, Missing))


@pytest.mark.parametrize("data, target", conversions)
def test_coerce_preserves_missing_values(data, target):
    result = coerce(data, target, verbosity=0)
    expected = pd.Series(data).isna().to_numpy()
    np.testing.assert_array_equal(result.isna().to_numpy(), expected)


@pytest.mark.parametrize("data, target", conversions)
def test_coerce_is_idempotent(data, target):
    once = coerce(data, target, verbosity=0)
    twice = coerce(once, target, verbosity=0)
    assert twice is not once
    pd.testing.assert_series_equal(once, twice)


@pytest.mark.parametrize("data, target, error", failures)
def test_coerce_raises_on_unsatisfiable_targets(data, target, error):
    with pytest.raises(error):
        coerce(data, target)


@pytest.mark.parametrize("data, target, error", failures)
def test_coerce_errors_are_value_errors(data, target, error):
    with pytest.raises(ValueError):
        coerce(data, target)


def test_coerce_to_continuous():
    result = coerce([1, 2, 3], "continuous")
    pd.testing.assert_series_equal(result, pd.Series([1.0, 2.0, 3.0]))


def test_coerce_to_count():
    result = coerce(pd.Series([1.0, 2.0]), Count)
    pd.testing.assert_series_equal(result, pd.Series([1, 2], dtype=np.int64))

    result = coerce(pd.Series([1.0, None]), Count, verbosity=0)
    assert result.dtype == pd.Int64Dtype()
    assert result[0] == 1
    assert result[1] is pd.NA


def test_coerce_to_multiclass_derives_levels():
    result = coerce(pd.Series(["b", "a", "b"]), "multiclass")
    assert list(result.cat.categories) == ["a", "b"]
    assert not result.cat.ordered
    assert elscitype(result) == Multiclass(2)


def test_coerce_to_ordered_factor_keeps_codes():
    data = pd.Series(pd.Categorical(["lo", "hi", "lo"], categories=["lo", "hi"]))
    result = coerce(data, OrderedFactor)
    assert result.cat.ordered
    assert list(result.cat.categories) == ["lo", "hi"]
    assert list(result.cat.codes) == list(data.cat.codes)


def test_coerce_to_fixed_levels_drops_unused_categories():
    data = pd.Series(
        pd.Categorical(["a", "b", "a"], categories=["a", "b", "c"])
    )
    result = coerce(data, Multiclass(2))
    assert list(result.cat.categories) == ["a", "b"]
    assert list(result) == ["a", "b", "a"]
    assert elscitype(result) == Multiclass(2)

    # without a fixed level count the declared categories are kept
    result = coerce(data, Multiclass)
    assert list(result.cat.categories) == ["a", "b", "c"]


def test_coerce_to_continuous_keeps_exact_large_integers():
    result = coerce(pd.Series([2**60]), Continuous)
    assert int(result[0]) == 2**60


def test_coerce_to_count_rejects_int64_overflow():
    with pytest.raises(UnsupportedCoercionError, match="64-bit"):
        coerce(pd.Series([2.0**63]), Count)


def test_coerce_to_textual():
    result = coerce(pd.Series([1, 2]), Textual)
    assert result.dtype == object
    assert list(result) == ["1", "2"]


def test_coerce_does_not_modify_input():
    data = pd.Series([1, 2, 3])
    coerce(data, Multiclass)
    assert data.dtype == np.int64


def test_coerce_returns_copy_when_already_conforming():
    data = pd.Series([1.0, 2.0])
    result = coerce(data, Continuous)
    assert result is not data
    pd.testing.assert_series_equal(result, data)


def test_coerce_warns_about_missing_values():
    with pytest.warns(UserWarning, match="missing"):
        coerce(pd.Series([1.0, None]), Continuous)


def test_coerce_does_not_warn_when_target_admits_missing():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = coerce(pd.Series([1.0, None]), Union(Count, Missing))
    assert result.dtype == pd.Int64Dtype()


def test_coerce_verbosity_silences_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        coerce(pd.Series([1.0, None]), Continuous, verbosity=0)


def test_coerce_errors_ignore_returns_data_unchanged():
    data = pd.Series([1.5])
    assert coerce(data, Count, errors="ignore") is data


def test_coerce_errors_warn_returns_data_unchanged():
    data = pd.Series([1.5])
    with pytest.warns(UserWarning, match="could not coerce"):
        assert coerce(data, Count, errors="warn") is data


def test_coerce_rejects_invalid_errors_rule():
    with pytest.raises(ValueError, match="errors"):
        coerce([1], Count, errors="coerce")


def test_coerce_rejects_invalid_specifiers():
    with pytest.raises(ValueError):
        coerce([1], "not_a_type")


def test_coerce_rejects_non_columns():
    with pytest.raises(TypeError):
        coerce(3, Count)


def test_coerce_managed_defaults():
    assert dict(coerce.settings) == {"errors": "raise", "verbosity": 1}

    coerce.errors = "ignore"
    data = pd.Series([1.5])
    assert coerce.errors == "ignore"
    assert coerce(data, Count) is data

    del coerce.errors
    assert coerce.errors == "raise"
    with pytest.raises(NonIntegralValueError):
        coerce(data, Count)

    with pytest.raises(ValueError):
        coerce.errors = "bogus"
    with pytest.raises(TypeError):
        coerce.verbosity = "loud"


def test_coerce_table_with_mapping():
    X = pd.DataFrame({
        "name": ["Siri", "Robo", "Alexa", "Cortana"],
        "height": pd.Series([152, None, 148, 163], dtype="Int64"),
        "rating": [1, 3, 2, 1],
    })
    result = coerce(
        X,
        {"name": Multiclass, "height": Continuous, "rating": OrderedFactor},
        verbosity=0
    )
    assert schema(result).scitypes == (
        Multiclass(4),
        Union(Continuous, Missing),
        OrderedFactor(3),
    )
    assert X["rating"].dtype == np.int64  # input untouched
    assert X["height"].dtype == pd.Int64Dtype()
    np.testing.assert_array_equal(
        result["height"].to_numpy(), [152.0, np.nan, 148.0, 163.0]
    )
    assert list(result.columns) == ["name", "height", "rating"]


def test_coerce_table_broadcasts_single_target():
    X = pd.DataFrame({"a": [1, 2], "b": [3, 4]})
    result = coerce(X, Continuous)
    assert (result.dtypes == np.float64).all()


def test_coerce_table_with_scitype_keys():
    X = pd.DataFrame({
        "a": [1, 2],
        "b": [1.5, 2.5],
        "c": ["x", "y"],
        "d": pd.Series([1, None], dtype="Int64"),
    })
    result = coerce(X, {Count: Continuous}, verbosity=0)
    assert result["a"].dtype == np.float64
    assert result["d"].dtype == np.float64
    pd.testing.assert_series_equal(result["b"], X["b"])
    pd.testing.assert_series_equal(result["c"], X["c"])


def test_coerce_column_mapping_returns_mapping():
    X = {"a": [1, 2], "b": ["x", "y"]}
    result = coerce(X, {"a": "continuous"})
    assert isinstance(result, dict)
    assert list(result) == ["a", "b"]
    assert result["b"] is X["b"]
    pd.testing.assert_series_equal(result["a"], pd.Series([1.0, 2.0]))


def test_coerce_table_rejects_unknown_columns():
    X = pd.DataFrame({"a": [1, 2]})
    with pytest.raises(ValueError, match="column not found"):
        coerce(X, {"b": Continuous})


def test_coerce_mapping_requires_table():
    with pytest.raises(NotATableError):
        coerce([1, 2], {"a": Continuous})
    with pytest.raises(TypeError):
        coerce([1, 2], {"a": Continuous})


def test_coerce_table_errors_name_the_column():
    X = pd.DataFrame({"x": [1.5, 2.0]})
    with pytest.raises(NonIntegralValueError, match="column 'x'"):
        coerce(X, Count)


def test_coerce_table_errors_warn_skips_column():
    X = pd.DataFrame({"x": [1.5, 2.0], "y": [1.0, 2.0]})
    with pytest.warns(UserWarning):
        result = coerce(X, Count, errors="warn")
    pd.testing.assert_series_equal(result["x"], X["x"])
    assert result["y"].dtype == np.int64
