"""
Central wiring — register the traits of every construction method.

To add a new construction method, add one ``register()`` call below.
This module is imported (as a side-effect) by ``core.digital_net`` and
``net_io`` to ensure traits are available before first use.
"""
from core.net_construction import NetConstruction
from infrastructure.registry import register, ConstructionTraits

from constructions.sobol import builder as sobol_builder
from constructions.sobol import formatter as sobol_formatter
from constructions.sobol import sampler as sobol_sampler
from constructions.sobol import serializer as sobol_serializer
from constructions.sobol.validator import validate as validate_sobol

from constructions.polynomial import builder as polynomial_builder
from constructions.polynomial import formatter as polynomial_formatter
from constructions.polynomial import sampler as polynomial_sampler
from constructions.polynomial import serializer as polynomial_serializer
from constructions.polynomial.validator import validate as validate_polynomial

from constructions.explicit import builder as explicit_builder
from constructions.explicit import formatter as explicit_formatter
from constructions.explicit import sampler as explicit_sampler
from constructions.explicit import serializer as explicit_serializer
from constructions.explicit.validator import validate as validate_explicit

from constructions.lms import builder as lms_builder
from constructions.lms import formatter as lms_formatter
from constructions.lms import sampler as lms_sampler
from constructions.lms import serializer as lms_serializer
from constructions.lms.validator import validate as validate_lms


# ---- Sobol ----
register(NetConstruction.SOBOL, ConstructionTraits(
    num_rows=sobol_builder.num_rows,
    num_cols=sobol_builder.num_cols,
    build_matrix=sobol_builder.build_matrix,
    validate=validate_sobol,
    is_sequence_viewable=True,
    format_extra=sobol_formatter.format_extra,
    default_size_parameter=sobol_builder.default_size_parameter,
    random_value=sobol_sampler.random_value,
    enumerate_values=sobol_sampler.enumerate_values,
    size_from_json=sobol_serializer.size_from_json,
    value_from_json=sobol_serializer.value_from_json,
    value_to_json=sobol_serializer.value_to_json,
))

# ---- Polynomial lattice rule ----
register(NetConstruction.POLYNOMIAL, ConstructionTraits(
    num_rows=polynomial_builder.num_rows,
    num_cols=polynomial_builder.num_cols,
    build_matrix=polynomial_builder.build_matrix,
    validate=validate_polynomial,
    is_sequence_viewable=False,
    format_extra=polynomial_formatter.format_extra,
    default_size_parameter=polynomial_builder.default_size_parameter,
    random_value=polynomial_sampler.random_value,
    enumerate_values=polynomial_sampler.enumerate_values,
    size_from_json=polynomial_serializer.size_from_json,
    value_from_json=polynomial_serializer.value_from_json,
    value_to_json=polynomial_serializer.value_to_json,
))

# ---- Explicit ----
register(NetConstruction.EXPLICIT, ConstructionTraits(
    num_rows=explicit_builder.num_rows,
    num_cols=explicit_builder.num_cols,
    build_matrix=explicit_builder.build_matrix,
    validate=validate_explicit,
    is_sequence_viewable=False,
    format_extra=explicit_formatter.format_extra,
    default_size_parameter=explicit_builder.default_size_parameter,
    random_value=explicit_sampler.random_value,
    enumerate_values=explicit_sampler.enumerate_values,
    size_from_json=explicit_serializer.size_from_json,
    value_from_json=explicit_serializer.value_from_json,
    value_to_json=explicit_serializer.value_to_json,
))

# ---- Left matrix scramble ----
register(NetConstruction.LMS, ConstructionTraits(
    num_rows=lms_builder.num_rows,
    num_cols=lms_builder.num_cols,
    build_matrix=lms_builder.build_matrix,
    validate=validate_lms,
    is_sequence_viewable=False,
    format_extra=lms_formatter.format_extra,
    default_size_parameter=lms_builder.default_size_parameter,
    random_value=lms_sampler.random_value,
    enumerate_values=lms_sampler.enumerate_values,
    size_from_json=lms_serializer.size_from_json,
    value_from_json=lms_serializer.value_from_json,
    value_to_json=lms_serializer.value_to_json,
))
