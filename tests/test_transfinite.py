"""
Tests for lazily generated transfinite numbers.
"""

import math

import pytest

from surreals import (
    FiniteNumber,
    GeneratedSide,
    InvalidConstruction,
    SurrealConfig,
    TransfiniteNumber,
    UnboundedSet,
    epsilon,
    local_context,
    naturals,
    negative_omega,
    omega,
)


class TestGeneration:
    """Tests for generated sides and their caches."""

    def test_zero(self):
        """No arguments means { | }."""
        z = TransfiniteNumber()
        assert z.left_size == 0
        assert z.right_size == 0
        assert z.to_float() == 0.0

    def test_generator_called_once_per_index(self):
        """A second access to the same index is served from the cache."""
        seen = []

        def gen(n):
            seen.append(n)
            return n

        x = TransfiniteNumber(gen, None, (-1, 0))
        first = x.get_left(3)
        second = x.get_left(3)

        assert first is second
        assert seen == [3]
        assert x.left.calls == 1
        assert set(x.left_cache) == {3}

    def test_caches_are_per_instance(self):
        """Two numbers built from one generator do not share elements."""
        a, b = omega(), omega()
        a.get_left(0)
        assert len(a.left_cache) == 1
        assert len(b.left_cache) == 0

    def test_cache_is_read_only(self):
        """The cache view cannot be written through."""
        x = omega()
        x.get_left(0)
        with pytest.raises(TypeError):
            x.left_cache[1] = TransfiniteNumber()

    def test_generator_results_are_coerced(self):
        """Generators may return ints, floats or finite numbers."""
        x = TransfiniteNumber(lambda n: FiniteNumber.from_int(1), lambda n: 1.5, (1, 1))
        assert isinstance(x.get_left(0), TransfiniteNumber)
        assert x.get_right(0).to_float() == 1.5
        assert x.to_float() == 1.25

    def test_size_without_generator(self):
        """A nonempty side needs a generating function."""
        with pytest.raises(InvalidConstruction):
            GeneratedSide(None, 2)
        with pytest.raises(InvalidConstruction):
            TransfiniteNumber(None, None, (-1, 0))

    def test_index_out_of_range(self):
        """Bounded sides reject indices past their size."""
        two = TransfiniteNumber.from_int(2)
        with pytest.raises(IndexError):
            two.get_left(1)
        with pytest.raises(IndexError):
            two.get_right(0)
        with pytest.raises(IndexError):
            omega().get_left(-1)

    def test_take(self):
        """take() yields the first elements in order."""
        values = [x.to_float() for x in omega().left.take(4)]
        assert values == [0.0, 1.0, 2.0, 3.0]

    def test_coerce(self):
        """coerce() accepts transfinite, finite, int and float values."""
        w = omega()
        assert TransfiniteNumber.coerce(w) is w
        assert TransfiniteNumber.coerce(3).to_float() == 3.0
        assert TransfiniteNumber.coerce(0.25).to_float() == 0.25
        assert TransfiniteNumber.coerce(FiniteNumber.from_int(-1)).to_float() == -1.0
        with pytest.raises(TypeError):
            TransfiniteNumber.coerce("omega")


class TestProjection:
    """Tests for conversion back to finite numbers and floats."""

    @pytest.mark.parametrize("value", [0, 1, -3, 0.375, -2.75])
    def test_finite_round_trip(self, value):
        """Wrapping and projecting a finite number keeps its value."""
        x = FiniteNumber.coerce(value)
        back = TransfiniteNumber.from_finite(x).to_finite()
        assert isinstance(back, FiniteNumber)
        assert back == x

    def test_projection_keeps_extremes(self):
        """Only the greatest left and least right element survive."""
        x = FiniteNumber([-1, 0, 1], [3, 4])
        back = TransfiniteNumber.from_finite(x).to_finite()
        assert len(back.left) == 1
        assert len(back.right) == 1
        assert back == 2

    def test_float_of_wrapped_integer(self):
        """float() of a wrapped 2 is 2.0."""
        assert float(TransfiniteNumber.from_int(2)) == 2.0

    def test_unbounded_projection_raises(self):
        """An infinite side has no finite projection."""
        with pytest.raises(UnboundedSet):
            omega().to_finite()
        with pytest.raises(UnboundedSet):
            FiniteNumber.from_transfinite(negative_omega())
        with pytest.raises(UnboundedSet):
            FiniteNumber.coerce(epsilon())

    def test_nested_unbounded_projection_raises(self):
        """An infinite side anywhere in the descent is enough to fail."""
        x = TransfiniteNumber(lambda n: omega(), None, (1, 0))
        assert not x.is_bounded()
        with pytest.raises(UnboundedSet):
            x.to_finite()

    def test_unbounded_float_is_nan(self):
        """to_float() reports unbounded numbers as nan instead of raising."""
        for x in (omega(), negative_omega(), epsilon()):
            assert math.isnan(x.to_float())
            assert not x.is_bounded()

    def test_is_bounded(self):
        """Numbers wrapped from finite ones are bounded all the way down."""
        assert TransfiniteNumber.from_float(0.75).is_bounded()
        assert TransfiniteNumber().is_bounded()


class TestNegation:
    """Tests for lazy negation."""

    def test_negation_swaps_sides(self):
        """-ω has an unbounded right side."""
        neg = -omega()
        assert neg.left_size == 0
        assert neg.right_size == -1

    def test_negation_is_lazy(self):
        """Negating generates nothing until an element is requested."""
        w = omega()
        neg = -w
        assert w.left.calls == 0

        assert neg.get_right(2).to_float() == -2.0
        assert w.left.calls == 1
        assert neg.right.calls == 1

    def test_negation_of_finite(self):
        """Negating a wrapped finite number negates its value."""
        x = TransfiniteNumber.from_float(0.375)
        assert (-x).to_float() == -0.375
        assert (-(-x)).to_float() == 0.375


class TestDisplay:
    """Tests for brace display of transfinite numbers."""

    def test_omega(self):
        """Unbounded left sides end with an ellipsis."""
        assert str(omega()) == "{ 0.000000 1.000000 2.000000 3.000000 4.000000 ... | }"

    def test_negative_omega(self):
        """Unbounded right sides start with an ellipsis and descend to the first element."""
        assert negative_omega().display() == (
            "{ | ... -4.000000 -3.000000 -2.000000 -1.000000 0.000000 }"
        )

    def test_epsilon(self):
        """ε = { 0 | ..., 1/4, 1/2, 1 }."""
        assert epsilon().display(3) == "{ 0.000000 | ... 0.250000 0.500000 1.000000 }"

    def test_width_from_config(self):
        """The active config decides how many generated elements are shown."""
        with local_context(SurrealConfig(display_width=2)):
            assert str(omega()) == "{ 0.000000 1.000000 ... | }"

    def test_zero_width(self):
        """Width 0 hides unbounded sides entirely."""
        assert omega().display(0) == "{ | }"

    def test_bounded_sides_print_everything(self):
        """Bounded sides ignore the width."""
        x = TransfiniteNumber(naturals, None, (3, 0))
        assert x.display(1) == "{ 0.000000 1.000000 2.000000 | }"

    def test_depth(self):
        """Depth 1 prints elements as braces one level down."""
        two = TransfiniteNumber.from_int(2)
        assert two.display(depth=1) == "{ { 0.000000 | } | }"

    def test_verbose_wrapped_integer(self):
        """Verbose form of a wrapped 2 matches the finite one."""
        assert TransfiniteNumber.from_int(2).display_verbose() == "{ { { | } | } | }"

    def test_verbose_unbounded(self):
        """Verbose form of ω expands each generated integer."""
        assert omega().display_verbose(2) == "{ { | } { { | } | } ... | }"

    def test_repr(self):
        """repr shows the side sizes."""
        assert repr(omega()) == "TransfiniteNumber(left_size=-1, right_size=0)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
