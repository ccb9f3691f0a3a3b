from constructions.explicit import builder
from constructions.explicit import formatter
from constructions.explicit import sampler
from constructions.explicit import serializer
from constructions.explicit import validator

__all__ = [
    "builder",
    "formatter",
    "sampler",
    "serializer",
    "validator",
]
