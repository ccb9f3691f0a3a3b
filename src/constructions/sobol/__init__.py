from constructions.sobol.direction_numbers import (
    JOE_KUO_DIRECTION_NUMBERS,
    PrimitivePolynomial,
    primitive_polynomial,
    joe_kuo_values,
)
from constructions.sobol import builder
from constructions.sobol import formatter
from constructions.sobol import sampler
from constructions.sobol import serializer
from constructions.sobol import validator

__all__ = [
    "JOE_KUO_DIRECTION_NUMBERS",
    "PrimitivePolynomial",
    "primitive_polynomial",
    "joe_kuo_values",
    "builder",
    "formatter",
    "sampler",
    "serializer",
    "validator",
]
