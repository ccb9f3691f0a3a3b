import pytest

from core import GeneratingMatrix, NetConstructionError, OutputStyle
from constructions.sobol import builder, formatter, validator
from constructions.sobol.direction_numbers import (
    JOE_KUO_DIRECTION_NUMBERS,
    PrimitivePolynomial,
    degree_for,
    joe_kuo_values,
    primitive_polynomial,
)


# ===========================================================
# Primitive polynomials
# ===========================================================

class TestPrimitivePolynomials:

    @pytest.mark.parametrize("coord,expected", [
        (1, PrimitivePolynomial(1, 0, 0b11)),
        (2, PrimitivePolynomial(2, 1, 0b111)),
        (3, PrimitivePolynomial(3, 1, 0b1011)),
        (4, PrimitivePolynomial(3, 2, 0b1101)),
        (5, PrimitivePolynomial(4, 1, 0b10011)),
        (6, PrimitivePolynomial(4, 4, 0b11001)),
        (7, PrimitivePolynomial(5, 2, 0b100101)),
    ])
    def test_joe_kuo_order(self, coord, expected):
        assert primitive_polynomial(coord) == expected

    def test_coordinate_zero_has_none(self):
        with pytest.raises(ValueError):
            primitive_polynomial(0)
        assert degree_for(0) == 0

    def test_degree_five_block(self):
        assert [degree_for(c) for c in range(7, 13)] == [5] * 6
        assert degree_for(13) == 6


# ===========================================================
# Reference direction numbers
# ===========================================================

class TestJoeKuo:

    @pytest.mark.parametrize("coord", range(len(JOE_KUO_DIRECTION_NUMBERS)))
    def test_reference_values_are_legal(self, coord):
        vr = validator.validate(JOE_KUO_DIRECTION_NUMBERS[coord], 10, coord)
        assert vr.is_valid, vr.errors

    def test_prefix(self):
        assert joe_kuo_values(3) == [(), (1,), (1, 3)]

    def test_too_many_requested(self):
        with pytest.raises(ValueError):
            joe_kuo_values(len(JOE_KUO_DIRECTION_NUMBERS) + 1)


# ===========================================================
# Validation
# ===========================================================

class TestValidation:

    def test_first_coordinate_takes_nothing(self):
        assert validator.validate((), 4, 0).is_valid
        assert not validator.validate((1,), 4, 0).is_valid

    def test_wrong_count(self):
        vr = validator.validate((1, 1), 4, 1)
        assert not vr.is_valid
        assert "takes 1 direction numbers" in vr.errors[0]

    @pytest.mark.parametrize("value", [(1, 2), (1, 5), (0, 1), (-1, 1)])
    def test_illegal_direction_numbers(self, value):
        assert not validator.validate(value, 4, 2).is_valid

    def test_negative_columns(self):
        assert not validator.validate((), -1, 0).is_valid


# ===========================================================
# Matrix construction
# ===========================================================

class TestBuildMatrix:

    def test_sizes(self):
        assert builder.num_rows(5) == 5
        assert builder.num_cols(5) == 5
        assert builder.default_size_parameter() == 0

    def test_first_coordinate_is_identity(self):
        assert builder.build_matrix((), 4, 0) == GeneratingMatrix.identity(4)

    def test_direction_numbers_degree_one(self):
        # m_k = 3 m_{k-1} without carries: rows of Pascal's triangle mod 2
        assert builder.direction_numbers((1,), 1, 4) == [1, 3, 5, 15]

    def test_direction_numbers_degree_two(self):
        assert builder.direction_numbers((1, 3), 2, 4) == [1, 3, 3, 9]

    def test_direction_numbers_truncated(self):
        assert builder.direction_numbers((1, 3, 1), 3, 2) == [1, 3]

    def test_second_coordinate(self):
        m = builder.build_matrix((1,), 3, 1)
        assert m.rows() == [[1, 1, 1], [0, 1, 0], [0, 0, 1]]

    def test_illegal_value_raises(self):
        with pytest.raises(NetConstructionError):
            builder.build_matrix((3,), 3, 1)

    def test_no_columns(self):
        assert builder.build_matrix((1,), 0, 1).shape == (0, 0)


# ===========================================================
# Extra text
# ===========================================================

class TestFormatter:

    def test_terminal(self):
        values = [(), (1,), (1, 3)]
        text = formatter.format_extra([], values, 3, OutputStyle.TERMINAL, 1)
        assert text == (
            "1  // Direction numbers of coordinate 2\n"
            "1 3  // Direction numbers of coordinate 3\n"
        )

    def test_net_style_adds_nothing(self):
        assert formatter.format_extra([], [(), (1,)], 3, OutputStyle.NET, 1) == ""
