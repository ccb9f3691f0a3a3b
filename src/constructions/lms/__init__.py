from constructions.lms.size_parameter import LMSSizeParameter
from constructions.lms import builder
from constructions.lms import formatter
from constructions.lms import sampler
from constructions.lms import serializer
from constructions.lms import validator

__all__ = [
    "LMSSizeParameter",
    "builder",
    "formatter",
    "sampler",
    "serializer",
    "validator",
]
