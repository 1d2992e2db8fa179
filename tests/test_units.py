"""Tests for units of measure."""

import pytest

from boxcore.system.units import UnitOfMeasure, from_meters, to_meters


class TestUnitOfMeasure:
    """Test the unit enum."""

    def test_symbols(self):
        """Test unit symbols."""
        assert UnitOfMeasure.METER.symbol == "m"
        assert UnitOfMeasure.CENTIMETER.symbol == "cm"
        assert UnitOfMeasure.MILLIMETER.symbol == "mm"

    def test_from_symbol_case_insensitive(self):
        """Test symbol lookup ignores case."""
        assert UnitOfMeasure.from_symbol("CM") is UnitOfMeasure.CENTIMETER
        assert UnitOfMeasure.from_symbol("mM") is UnitOfMeasure.MILLIMETER

    def test_from_symbol_unknown(self):
        """Test that unknown symbols raise errors."""
        with pytest.raises(ValueError):
            UnitOfMeasure.from_symbol("km")

    def test_per_meter(self):
        """Test unit counts per meter."""
        assert UnitOfMeasure.METER.per_meter == 1.0
        assert UnitOfMeasure.CENTIMETER.per_meter == 100.0
        assert UnitOfMeasure.MILLIMETER.per_meter == 1000.0


class TestConversion:
    """Test conversion to and from meters."""

    def test_to_meters(self):
        """Test conversion into meters."""
        assert to_meters(2500, UnitOfMeasure.MILLIMETER) == 2.5
        assert to_meters(250, UnitOfMeasure.CENTIMETER) == 2.5
        assert to_meters(2.5, UnitOfMeasure.METER) == 2.5

    def test_to_meters_returns_float(self):
        """Test that integers come back as floats."""
        assert isinstance(to_meters(3, UnitOfMeasure.METER), float)

    def test_from_meters(self):
        """Test conversion out of meters."""
        assert from_meters(2.5, UnitOfMeasure.MILLIMETER) == 2500.0
        assert from_meters(2.5, UnitOfMeasure.CENTIMETER) == 250.0
        assert from_meters(2.5, UnitOfMeasure.METER) == 2.5

    def test_symbol_units(self):
        """Test that unit symbols are accepted in place of the enum."""
        assert to_meters(250, "cm") == 2.5
        assert from_meters(2.5, "mm") == 2500.0
        with pytest.raises(ValueError):
            to_meters(1, "km")
