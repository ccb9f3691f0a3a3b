"""
Polynomial arithmetic over GF(2).

A polynomial is a plain non-negative ``int`` whose bit ``i`` is the
coefficient of ``x^i``: ``0b1011`` is ``x^3 + x + 1``.  The zero
polynomial has degree ``-1``.
"""
from __future__ import annotations

from functools import lru_cache


def degree(p: int) -> int:
    return p.bit_length() - 1


def multiply(a: int, b: int) -> int:
    """Carry-less product of two polynomials."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def mod(a: int, modulus: int) -> int:
    """Remainder of ``a`` divided by ``modulus``.  Raises on a zero modulus."""
    if modulus == 0:
        raise ZeroDivisionError("polynomial modulus is zero")
    deg_m = degree(modulus)
    while degree(a) >= deg_m:
        a ^= modulus << (degree(a) - deg_m)
    return a


def mulmod(a: int, b: int, modulus: int) -> int:
    return mod(multiply(a, b), modulus)


def powmod(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` reduced modulo ``modulus`` (square and multiply)."""
    result = mod(1, modulus)
    base = mod(base, modulus)
    while exponent:
        if exponent & 1:
            result = mulmod(result, base, modulus)
        base = mulmod(base, base, modulus)
        exponent >>= 1
    return result


def gcd(a: int, b: int) -> int:
    while b:
        a, b = b, mod(a, b)
    return a


def _prime_factors(n: int) -> list[int]:
    factors: list[int] = []
    d = 2
    while d * d <= n:
        if n % d == 0:
            factors.append(d)
            while n % d == 0:
                n //= d
        d += 1
    if n > 1:
        factors.append(n)
    return factors


def is_primitive(p: int) -> bool:
    """
    ``True`` if ``p`` is a primitive polynomial, i.e. ``x`` has
    multiplicative order exactly ``2^deg(p) - 1`` modulo ``p``.

    A reducible polynomial has fewer than ``2^deg(p) - 1`` units in its
    residue ring, so the order test alone also rules out reducibility.
    """
    deg = degree(p)
    if deg < 1 or not p & 1:
        return False
    order = (1 << deg) - 1
    if powmod(0b10, order, p) != 1:
        return False
    return all(powmod(0b10, order // q, p) != 1 for q in _prime_factors(order))


@lru_cache(maxsize=None)
def primitive_polynomials(deg: int) -> tuple[int, ...]:
    """
    All primitive polynomials of degree ``deg``, ascending.

    Ascending integer order equals ascending order of the inner
    coefficients ``a_1 ... a_{deg-1}`` read as a binary number.
    """
    if deg < 1:
        return ()
    head = 1 << deg
    return tuple(
        head | (a << 1) | 1
        for a in range(1 << (deg - 1))
        if is_primitive(head | (a << 1) | 1)
    )


def laurent_digits(numerator: int, modulus: int, count: int) -> list[int]:
    """
    First ``count`` coefficients ``u_1, u_2, ...`` of the expansion
    ``numerator / modulus = sum_{l >= 1} u_l x^-l``.

    Requires ``deg(numerator) < deg(modulus)``.
    """
    deg_m = degree(modulus)
    remainder = numerator
    digits: list[int] = []
    for _ in range(count):
        remainder <<= 1
        if degree(remainder) == deg_m:
            digits.append(1)
            remainder ^= modulus
        else:
            digits.append(0)
    return digits


def to_string(p: int) -> str:
    """Human-readable form, highest degree first: ``x^3 + x + 1``."""
    if p == 0:
        return "0"
    terms = []
    for i in range(degree(p), -1, -1):
        if (p >> i) & 1:
            terms.append("1" if i == 0 else "x" if i == 1 else f"x^{i}")
    return " + ".join(terms)
