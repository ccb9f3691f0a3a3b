"""
Hypothesis property-based tests for net construction and extension.

The core properties: growing a placeholder one coordinate at a time
builds the same net as a direct construction, every extension leaves
its parent untouched, and every one-dimensional projection of a Sobol
net hits each dyadic interval exactly once.
"""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import numpy as np

from core import DigitalNet, NetConstruction
from constructions.sobol.direction_numbers import degree_for


# ------------------------------------------------------------------
# Strategies
# ------------------------------------------------------------------

_num_cols = st.integers(min_value=1, max_value=6)


@st.composite
def sobol_value(draw: st.DrawFn, coord: int) -> tuple[int, ...]:
    """Legal initial direction numbers for coordinate ``coord``."""
    return tuple(
        2 * draw(st.integers(min_value=0, max_value=(1 << (k - 1)) - 1)) + 1
        for k in range(1, degree_for(coord) + 1)
    )


@st.composite
def sobol_values(draw: st.DrawFn, max_dimension: int = 6) -> list[tuple[int, ...]]:
    dimension = draw(st.integers(min_value=1, max_value=max_dimension))
    return [draw(sobol_value(coord)) for coord in range(dimension)]


@st.composite
def polynomial_values(draw: st.DrawFn) -> tuple[int, list[int]]:
    modulus = draw(st.sampled_from([0b111, 0b1011, 0b10011, 0b100101, 0b11001]))
    m = modulus.bit_length() - 1
    values = draw(st.lists(st.integers(min_value=0, max_value=(1 << m) - 1), min_size=1, max_size=5))
    return modulus, values


# ------------------------------------------------------------------
# Properties
# ------------------------------------------------------------------

class TestSobolProperties:

    @given(num_cols=_num_cols, values=sobol_values())
    @settings(max_examples=60)
    def test_growth_matches_direct_build(self, num_cols, values):
        net = DigitalNet(NetConstruction.SOBOL, num_cols)
        for value in values:
            net = net.append_new_coordinate(value)
        direct = DigitalNet(NetConstruction.SOBOL, num_cols, values)
        assert net.generating_matrices == direct.generating_matrices
        assert net.dimension == len(values)

    @given(num_cols=_num_cols, values=sobol_values(max_dimension=5), data=st.data())
    @settings(max_examples=60)
    def test_parent_untouched(self, num_cols, values, data):
        parent = DigitalNet(NetConstruction.SOBOL, num_cols, values)
        snapshot = parent.generating_matrices
        child = parent.append_new_coordinate(data.draw(sobol_value(len(values))))
        assert parent.generating_matrices is snapshot
        assert child.generating_matrices[:-1] == snapshot
        assert all(a is b for a, b in zip(child.generating_matrices, snapshot))

    @given(num_cols=_num_cols, values=sobol_values())
    @settings(max_examples=60)
    def test_matrices_upper_unit_triangular(self, num_cols, values):
        net = DigitalNet(NetConstruction.SOBOL, num_cols, values)
        for matrix in net.generating_matrices:
            bits = matrix.bits
            assert np.array_equal(bits, np.triu(bits))
            assert np.all(np.diag(bits) == 1)

    @given(num_cols=_num_cols, values=sobol_values(max_dimension=4))
    @settings(max_examples=40)
    def test_projections_are_stratified(self, num_cols, values):
        net = DigitalNet(NetConstruction.SOBOL, num_cols, values)
        scaled = np.rint(net.points() * net.num_points).astype(int)
        for coord in range(net.dimension):
            assert sorted(scaled[:, coord]) == list(range(net.num_points))


class TestPolynomialProperties:

    @given(case=polynomial_values())
    @settings(max_examples=60)
    def test_matrices_are_hankel(self, case):
        modulus, values = case
        net = DigitalNet(NetConstruction.POLYNOMIAL, modulus, values)
        for matrix in net.generating_matrices:
            bits = matrix.bits
            m = matrix.num_rows
            for i in range(1, m):
                for j in range(m - 1):
                    assert bits[i, j] == bits[i - 1, j + 1]

    @given(case=polynomial_values())
    @settings(max_examples=60)
    def test_points_lie_in_unit_cube(self, case):
        modulus, values = case
        points = DigitalNet(NetConstruction.POLYNOMIAL, modulus, values).points()
        assert np.all(points >= 0.0)
        assert np.all(points < 1.0)
