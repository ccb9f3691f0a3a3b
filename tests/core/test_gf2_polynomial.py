import pytest

from core import gf2_polynomial as gf2


# ===========================================================
# Arithmetic
# ===========================================================

class TestArithmetic:

    def test_degree(self):
        assert gf2.degree(0) == -1
        assert gf2.degree(1) == 0
        assert gf2.degree(0b1011) == 3

    def test_multiply_squares_without_carry(self):
        # (x + 1)^2 = x^2 + 1 over GF(2)
        assert gf2.multiply(0b11, 0b11) == 0b101

    def test_mod(self):
        assert gf2.mod(0b101, 0b11) == 0
        # x^3 = x + 1 (mod x^3 + x + 1)
        assert gf2.mod(0b1000, 0b1011) == 0b11

    def test_mod_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            gf2.mod(0b101, 0)

    def test_powmod_order_of_x(self):
        assert gf2.powmod(0b10, 7, 0b1011) == 1
        assert gf2.powmod(0b10, 3, 0b1011) != 1

    def test_gcd(self):
        assert gf2.gcd(0b101, 0b11) == 0b11
        assert gf2.gcd(0b1011, 0b10) == 1
        assert gf2.gcd(0b111, 0) == 0b111


# ===========================================================
# Primitive polynomials
# ===========================================================

class TestPrimitive:

    @pytest.mark.parametrize("poly", [0b11, 0b111, 0b1011, 0b1101, 0b10011, 0b11001, 0b100101])
    def test_primitive(self, poly):
        assert gf2.is_primitive(poly)

    @pytest.mark.parametrize("poly", [
        0b11111,   # irreducible, x has order 5
        0b10101,   # (x^2 + x + 1)^2
        0b1001,    # x^3 + 1 = (x + 1)(x^2 + x + 1)
        0b110,     # divisible by x
        0b1,       # constant
    ])
    def test_not_primitive(self, poly):
        assert not gf2.is_primitive(poly)

    def test_primitive_polynomials_ascending(self):
        assert gf2.primitive_polynomials(1) == (0b11,)
        assert gf2.primitive_polynomials(2) == (0b111,)
        assert gf2.primitive_polynomials(3) == (0b1011, 0b1101)
        assert gf2.primitive_polynomials(4) == (0b10011, 0b11001)

    @pytest.mark.parametrize("deg,count", [(5, 6), (6, 6), (7, 18)])
    def test_primitive_polynomial_counts(self, deg, count):
        # phi(2^deg - 1) / deg
        assert len(gf2.primitive_polynomials(deg)) == count


# ===========================================================
# Laurent expansion and display
# ===========================================================

class TestLaurentDigits:

    def test_one_over_x_plus_one(self):
        assert gf2.laurent_digits(1, 0b11, 5) == [1, 1, 1, 1, 1]

    def test_one_over_x2_x_1(self):
        assert gf2.laurent_digits(1, 0b111, 6) == [0, 1, 1, 0, 1, 1]

    def test_x_over_x2_x_1(self):
        assert gf2.laurent_digits(0b10, 0b111, 3) == [1, 1, 0]

    def test_zero_numerator(self):
        assert gf2.laurent_digits(0, 0b1011, 4) == [0, 0, 0, 0]


class TestToString:

    def test_to_string(self):
        assert gf2.to_string(0b1011) == "x^3 + x + 1"
        assert gf2.to_string(0b110) == "x^2 + x"
        assert gf2.to_string(1) == "1"
        assert gf2.to_string(0) == "0"
