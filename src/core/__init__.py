from core.net_construction import NetConstruction
from core.output_style import OutputStyle
from core.validation_result import ValidationResult
from core.generating_matrix import GeneratingMatrix, OUTPUT_DIGITS
from core.errors import NetError, NetConstructionError, NetCapacityError
from core.interfaces import AbstractDigitalNet, HasGeneratingMatrices, MAX_NUM_COLUMNS
from core.digital_net import DigitalNet
from core import gf2_polynomial

__all__ = [
    "NetConstruction",
    "OutputStyle",
    "ValidationResult",
    "GeneratingMatrix",
    "OUTPUT_DIGITS",
    "NetError",
    "NetConstructionError",
    "NetCapacityError",
    "AbstractDigitalNet",
    "HasGeneratingMatrices",
    "MAX_NUM_COLUMNS",
    "DigitalNet",
    "gf2_polynomial",
]
