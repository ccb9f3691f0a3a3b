from constructions.polynomial import builder
from constructions.polynomial import formatter
from constructions.polynomial import sampler
from constructions.polynomial import serializer
from constructions.polynomial import validator

__all__ = [
    "builder",
    "formatter",
    "sampler",
    "serializer",
    "validator",
]
