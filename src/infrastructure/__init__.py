from infrastructure.registry import ConstructionTraits, register, get_traits, registered_constructions
from infrastructure.net_io import save_net, load_net, parse_net

__all__ = [
    "ConstructionTraits",
    "register",
    "get_traits",
    "registered_constructions",
    "save_net",
    "load_net",
    "parse_net",
]
