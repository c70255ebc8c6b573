"""
Tests for the ConstructionCompany facade.
"""

from unittest.mock import patch

import pytest

from construction.core.builder import HouseBuilder
from construction.core.company import UNKNOWN_DESCRIPTION, ConstructionCompany
from construction.domain.models import HouseKind, UnknownHouseTypeError


class TestConstructHouse:
    """Tests for construct_house."""

    @pytest.mark.parametrize("house_type", ["wood", "brick", "luxury"])
    def test_builds_known_types(self, company, read_output, house_type):
        assert company.construct_house(house_type) is True
        output = read_output()
        assert output.count("[STEP ") == 5
        assert f"{house_type.upper()} house construction completed!" in output

    def test_case_insensitive(self, company, read_output):
        assert company.construct_house("BrIcK") is True
        assert "Building a BRICK house:" in read_output()

    def test_header_precedes_build(self, company, read_output):
        company.construct_house("wood")
        output = read_output()
        assert output.index("Using standard construction template...") < output.index("[STEP 1/5]")
        assert output.index("[COMPLETE]") < output.index("WOOD house construction completed!")

    def test_surrounding_whitespace_ignored(self, company, read_output):
        assert company.construct_house(" wood \n") is True
        assert "Building a WOOD house:" in read_output()

    @pytest.mark.parametrize("house_type", ["castle", "CASTLE", "", "wooden"])
    def test_unknown_type_is_reported_not_raised(self, company, read_output, house_type):
        with patch.object(HouseBuilder, "build") as build:
            assert company.construct_house(house_type) is False
        build.assert_not_called()

        output = read_output()
        assert "[ERROR] We don't know how to build" in output
        assert "Available types: wood, brick, luxury" in output
        assert "[STEP" not in output

    def test_builder_fault_is_reported_and_propagated(self, company, read_output):
        with patch.object(HouseBuilder, "_paint_house", side_effect=OSError("paint spilled")):
            with pytest.raises(OSError, match="paint spilled"):
                company.construct_house("luxury")

        output = read_output()
        assert "[ERROR] Construction of LUXURY house failed: paint spilled" in output
        assert "construction completed!" not in output


class TestCatalogQueries:
    """Tests for the read-only facade operations."""

    def test_available_house_types(self, company):
        assert company.get_available_house_types() == ["wood", "brick", "luxury"]

    def test_available_house_types_unaffected_by_callers(self, company):
        types = company.get_available_house_types()
        types.reverse()
        types.append("castle")
        company.construct_house("luxury")
        assert company.get_available_house_types() == ["wood", "brick", "luxury"]

    def test_house_description(self, company):
        assert company.get_house_description("brick") == "🧱 Brick house with chimney and garden path"

    def test_house_description_case_insensitive(self, company):
        assert company.get_house_description("LUXURY") == company.get_house_description("luxury")

    def test_house_description_unknown(self, company):
        assert company.get_house_description("castle") == UNKNOWN_DESCRIPTION

    def test_house_description_prints_nothing(self, company, read_output):
        company.get_house_description("wood")
        company.get_house_description("castle")
        assert read_output() == ""

    def test_house_plan(self, company):
        plan = company.get_house_plan(" Wood ")
        assert plan.kind is HouseKind.WOOD
        assert plan.materials == "Timber walls"

    def test_house_plan_unknown(self, company):
        with pytest.raises(UnknownHouseTypeError):
            company.get_house_plan("castle")

    def test_default_console(self):
        """A company without an injected console still works."""
        assert ConstructionCompany().get_available_house_types()[0] == "wood"
