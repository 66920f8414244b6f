"""Tests for views into copies made during resolution."""

import gc
import weakref

import numpy as np
import pytest

from indexview import (
    Holder,
    IndexOutOfRange,
    MinMax,
    Multi,
    Resolution,
    ResultKind,
    Uni,
    make_holder,
    resolve,
)


class TestHolder:
    """Test the Holder type on its own."""

    def test_view_is_deferred_and_cached(self):
        calls = []

        def build(owned):
            calls.append(1)
            return owned[1:]

        holder = Holder(np.arange(4), build)
        assert calls == []
        first = holder.view
        second = holder.view
        assert first is second
        assert calls == [1]

    def test_make_holder_evaluates_eagerly(self):
        """Errors from the deferred computation surface immediately."""

        def build(owned, n):
            raise IndexOutOfRange("test", "x", len(owned), n)

        with pytest.raises(IndexOutOfRange):
            make_holder(build, np.arange(3), 7)

    def test_make_holder_passes_args(self):
        holder = make_holder(lambda owned, lo, hi: owned[lo:hi], np.arange(5), 1, 3)
        np.testing.assert_array_equal(holder.view, [1, 2])
        assert np.shares_memory(holder.view, holder.owned)

    def test_repr(self):
        holder = Holder(np.zeros((2, 3)), lambda owned: owned)
        assert repr(holder) == "Holder(ndarray, shape=(2, 3))"
        assert repr(Holder([1, 2], lambda owned: owned)) == "Holder(list, len=2)"

    def test_repr_scalar(self):
        """A held value without shape or length still has a repr."""
        assert repr(Holder(3.5, lambda owned: owned)) == "Holder(float)"


class TestResolution:
    def test_holder_only_on_views(self):
        holder = Holder(np.arange(3), lambda owned: owned[:1])
        with pytest.raises(ValueError, match="Only views carry a holder"):
            Resolution(np.arange(3), ResultKind.MATERIALIZED, holder)

    def test_held_view(self):
        holder = Holder(np.arange(3), lambda owned: owned[:1])
        result = Resolution.held(holder)
        assert result.is_view
        assert result.referent is holder.owned

    def test_borrowed_view_has_no_referent(self):
        assert Resolution.view(np.arange(3)).referent is None


@pytest.mark.holder
class TestMatrixHolders:
    """Row views into gathered columns own the gathered copy."""

    def test_range_rows_of_gathered_columns(self, m):
        result = resolve(m, "m", MinMax(2, 3), Multi([4, 1]))
        assert result.kind is ResultKind.VIEW
        assert result.holder is not None
        np.testing.assert_array_equal(result.value, [[24, 21], [34, 31]])
        assert np.shares_memory(result.value, result.referent)
        assert not np.shares_memory(result.value, m)

    def test_referent_shape(self, m):
        """The holder owns every row of the gathered columns."""
        result = resolve(m, "m", MinMax(2, 3), Multi([4, 1, 4]))
        assert result.referent.shape == (4, 3)
        assert result.value.shape == (2, 3)

    def test_empty_rows_of_gathered_columns(self, m):
        result = resolve(m, "m", MinMax(3, 2), Multi([2]))
        assert result.holder is not None
        assert result.value.shape == (0, 1)

    def test_view_outlives_resolution(self, m):
        """The view stays valid after the result and its holder are dropped."""
        result = resolve(m, "m", MinMax(1, 2), Multi([2, 3]))
        value = result.value
        holder = weakref.ref(result.holder)
        del result
        gc.collect()
        assert holder() is None
        np.testing.assert_array_equal(value, [[12, 13], [22, 23]])

    def test_row_error_inside_holder(self, m):
        with pytest.raises(IndexOutOfRange, match="max row indexing"):
            resolve(m, "m", MinMax(1, 5), Multi([1]))

    def test_borrowed_views_have_no_holder(self, m):
        """Views of the caller's base need no holder."""
        assert resolve(m, "m", MinMax(1, 2), MinMax(1, 2)).holder is None
        assert resolve(m, "m", Uni(1), MinMax(1, 2)).holder is None
