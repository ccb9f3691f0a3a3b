import pytest

from core import NetConstruction
from infrastructure import ConstructionTraits, get_traits, register, registered_constructions


class TestRegistry:

    def test_every_construction_registered(self):
        assert set(registered_constructions()) == set(NetConstruction)

    @pytest.mark.parametrize("construction", list(NetConstruction))
    def test_get_traits(self, construction):
        traits = get_traits(construction)
        assert isinstance(traits, ConstructionTraits)
        assert callable(traits.build_matrix)

    def test_only_sobol_is_sequence_viewable(self):
        flags = {c: get_traits(c).is_sequence_viewable for c in NetConstruction}
        assert flags == {
            NetConstruction.SOBOL: True,
            NetConstruction.POLYNOMIAL: False,
            NetConstruction.EXPLICIT: False,
            NetConstruction.LMS: False,
        }

    def test_duplicate_registration(self):
        with pytest.raises(ValueError):
            register(NetConstruction.SOBOL, get_traits(NetConstruction.SOBOL))

    def test_missing_traits(self):
        with pytest.raises(ValueError, match="registrations.py"):
            get_traits("halton")

    def test_traits_are_frozen(self):
        traits = get_traits(NetConstruction.SOBOL)
        with pytest.raises(AttributeError):
            traits.is_sequence_viewable = False
