"""
Tests for dimensionally checked quantities.
"""

import random

import pytest

from exactqty import (
    DimensionalError, IncompatibleUnitsError, Rational, UnitOfMeasure, UnitPowers, Value,
    default_registry,
)


class TestValueArithmetic:

    def setup_method(self):
        self.units = default_registry()

    def test_add_same_units(self):
        """Values in the same unit add directly"""
        r = 1 * self.units.meter + 1 * self.units.meter
        assert r.to_float() == 2

    def test_add_same_dimensionless_units(self):
        """Named dimensionless units add with themselves"""
        r = 1 * self.units.radian + 1 * self.units.radian
        assert r.to_float() == 2

    def test_add_different_scales(self):
        """The right operand is converted into the left operand's unit"""
        r = 1 * self.units.meter + 1 * self.units.centimeter
        assert r.to_float() == 1.01
        assert r.unit is self.units.meter

    def test_add_different_units_fails(self):
        """Mismatched dimensions cannot be added"""
        with pytest.raises(IncompatibleUnitsError):
            Value(1, self.units.meter) + Value(1, self.units.second)

    def test_add_different_dimensionless_units_fails(self):
        """Radian and steradian are different dimensions"""
        with pytest.raises(IncompatibleUnitsError):
            1 * self.units.radian + 1 * self.units.steradian

    def test_subtract_different_units_fails(self):
        """Subtraction checks dimensions too"""
        with pytest.raises(DimensionalError):
            Value(1, self.units.meter) - Value(1, self.units.kilogram)

    def test_add_requires_value(self):
        """Plain numbers cannot be added to quantities"""
        with pytest.raises(TypeError):
            Value(1, self.units.meter) + 1

    def test_left_operand_unit(self):
        """The result uses the left operand's unit"""
        a = 80 * self.units.centimeter + 2 * self.units.decimeter
        assert a.unit is self.units.centimeter
        assert a.x.numerator == 100
        assert a.x.denominator == 1

        b = 2 * self.units.decimeter + 80 * self.units.centimeter
        assert b.unit is self.units.decimeter
        assert b.x.numerator == 10
        assert b.x.denominator == 1

    def test_subtract(self):
        """Subtraction converts like addition"""
        r = 1 * self.units.kilometer - 250 * self.units.meter
        assert r.unit is self.units.kilometer
        assert r.x == Rational(3, 4)

    def test_multiply_values(self):
        """Magnitudes multiply and units compose"""
        r = (2 * self.units.meter) * (3 * self.units.second)
        assert r.x == 6
        assert r.unit.symbol == "m*s"

    def test_divide_values_keeps_magnitude(self):
        """No rescaling happens when units compose"""
        r = (36 * self.units.kilometer) / (1 * self.units.hour)
        assert r.x == 36
        assert r.unit.scale == Rational(1000, 3600)
        assert r == 10 * (self.units.meter / self.units.second)

    def test_scalar_multiply_and_divide(self):
        """Scalars scale the magnitude only"""
        v = 2 * self.units.meter
        assert (v * 3).x == 6
        assert (3 * v).x == 6
        assert (v / 4).x == Rational(1, 2)
        assert (v * 3).unit is self.units.meter
        assert (v * Rational(1, 2)).x == 1

    def test_value_times_unit(self):
        """Units chain onto values"""
        v = 1 * self.units.meter / self.units.second
        assert v.unit.symbol == "m/s"
        w = self.units.second * (2 * self.units.meter)
        assert w.x == 2
        assert w.unit.symbol == "s*m"

    def test_pow(self):
        """Powers raise magnitude and unit"""
        r = (3 * self.units.meter) ** 2
        assert r.x == 9
        assert r.unit.symbol == "m²"
        assert (2 * self.units.second).pow(-1).x == Rational(1, 2)

    def test_reciprocal(self):
        """1 / v and v.inverse invert magnitude and unit"""
        a = 2 * self.units.meter
        for b in (1 / a, a.inverse):
            assert b.x == Rational(1, 2)
            assert b.unit.base_units == UnitPowers(self.units.meter, -1)

    def test_reciprocal_of_zero(self):
        """Zero magnitudes have no reciprocal"""
        with pytest.raises(ZeroDivisionError):
            (0 * self.units.meter).inverse

    def test_negate_and_abs(self):
        """Sign operations keep the unit"""
        v = -(3 * self.units.meter)
        assert v.x == -3
        assert abs(v).x == 3
        assert abs(v).unit is self.units.meter

    def test_requires_unit(self):
        """The unit argument is checked"""
        with pytest.raises(TypeError):
            Value(1, "m")


class TestValueComparison:

    def setup_method(self):
        self.units = default_registry()
        self.kmh = UnitOfMeasure("kilometers per hour", "km/h",
                                 self.units.kilometer / self.units.hour)

    def test_equal_across_scales(self):
        """Equality compares base-normalized magnitudes"""
        a = 1.0 * self.units.meter / self.units.second
        b = 3.6 * self.units.kilometer / self.units.hour
        assert a == b
        assert 3.6 * self.kmh == a

    def test_different_dimensions_not_equal(self):
        """Equality across dimensions is simply false"""
        assert (1 * self.units.meter) != (1 * self.units.second)
        assert not (1 * self.units.meter) == (1 * self.units.second)

    def test_ordering(self):
        """Ordering is exact across compatible units"""
        assert 1 * self.units.kilometer > 999 * self.units.meter
        assert 1 * self.units.kilometer >= 1000 * self.units.meter
        assert 1 * self.units.inch < 3 * self.units.centimeter
        assert 1 * self.units.foot <= 12 * self.units.inch

    def test_ordering_across_dimensions_fails(self):
        """Incompatible quantities have no order"""
        with pytest.raises(IncompatibleUnitsError):
            (1 * self.units.meter) < (1 * self.units.second)
        with pytest.raises(IncompatibleUnitsError):
            (1 * self.units.meter) >= (1 * self.units.kilogram)

    def test_hash_consistent_with_equality(self):
        """Equal quantities hash equally"""
        assert hash(1 * self.units.kilometer) == hash(1000 * self.units.meter)
        assert len({1 * self.units.kilometer, 1000 * self.units.meter}) == 1

    def test_comparison_with_non_value(self):
        """Non-quantities are never equal"""
        assert (1 * self.units.meter) != 1


class TestConversion:

    def setup_method(self):
        self.units = default_registry()
        u = self.units
        watt = UnitOfMeasure("watt", "W", u.kilogram * u.meter ** 2 / u.second ** 3)
        self.kilowatt = UnitOfMeasure("kilowatt", "kW", watt, 1000)
        self.ps = UnitOfMeasure("metric horsepower", "PS", watt, Rational(73549875, 100000))

    def test_convert_to(self):
        """Conversion uses the exact scale ratio"""
        v = (5000 * self.units.meter).convert_to(self.units.kilometer)
        assert v.x == 5
        assert v.unit is self.units.kilometer

    def test_convert_power(self):
        """88 kW is a little under 120 PS"""
        a = (88 * self.kilowatt).convert_to(self.ps)
        assert 119 < a.x.to_float() < 120

    def test_convert_incompatible(self):
        """Conversion requires matching dimensions"""
        with pytest.raises(IncompatibleUnitsError):
            (1 * self.units.meter).convert_to(self.units.second)

    def test_round_trip_is_exact(self):
        """Converting there and back restores the value exactly"""
        rng = random.Random(3)
        lengths = [self.units.meter, self.units.kilometer, self.units.centimeter,
                   self.units.inch, self.units.foot, self.units.mile]
        for _ in range(100):
            u1, u2 = rng.choice(lengths), rng.choice(lengths)
            v = Value(Rational(rng.randint(-10 ** 6, 10 ** 6), rng.randint(1, 10 ** 4)), u1)
            back = v.convert_to(u2).convert_to(u1)
            assert back == v
            assert back.x == v.x

    def test_to_alias(self):
        """The short name converts too"""
        assert (1 * self.units.hour).to(self.units.minute).x == 60

    def test_float_of_dimensionless(self):
        """Only dimensionless quantities convert to float"""
        ratio = 3 * (self.units.meter / self.units.centimeter)
        assert float(ratio) == 300.0
        with pytest.raises(IncompatibleUnitsError):
            float(1 * self.units.meter)

    def test_check_dimensions(self):
        """Dimension checks compare base vectors"""
        v = 3 * self.units.kilometer / self.units.hour
        u = self.units
        assert v.check_dimensions(UnitPowers([(u.meter, 1), (u.second, -1)]))
        assert not v.check_dimensions(UnitPowers(u.meter, 1))


class TestFormatting:

    def setup_method(self):
        self.units = default_registry()
        u = self.units
        self.mps = UnitOfMeasure("meters per second", "m/s", u.meter / u.second)
        self.kmh = UnitOfMeasure("kilometers per hour", "km/h", u.kilometer / u.hour)
        self.square_meter = UnitOfMeasure("square meter", "m²", u.meter * u.meter)
        self.square_decimeter = UnitOfMeasure("square decimeter", "dm²", u.decimeter * u.decimeter)

    def test_left_unit_formatting(self):
        """Sums print in the left operand's unit"""
        u = self.units
        assert str(80 * u.centimeter + 2 * u.decimeter) == "100 cm"
        assert str(2 * u.decimeter + 80 * u.centimeter) == "10 dm"

    @pytest.mark.parametrize("build, text", [
        (lambda u, t: 1 * u.meter / u.second, "1 m/s"),
        (lambda u, t: 1 * u.centimeter / u.second, "1 cm/s"),
        (lambda u, t: 1 * t.mps, "1 m/s"),
        (lambda u, t: 3.6 * t.kmh, "3.6 km/h"),
        (lambda u, t: 3.6 * u.kilometer / u.hour, "3.6 km/h"),
        (lambda u, t: 1 * u.foot / u.second, "1 ft/s"),
        (lambda u, t: 2 * u.meter, "2 m"),
        (lambda u, t: 1 / (2 * u.meter), "0.5 [m^-1]"),
        (lambda u, t: (2 * u.meter).inverse, "0.5 [m^-1]"),
        (lambda u, t: 1 * u.mile.pow(2), "1 mi²"),
        (lambda u, t: 50 * u.decimeter * u.decimeter, "50 dm²"),
        (lambda u, t: Value(Rational(1, 3), u.meter), "0.333333333333333 m"),
        (lambda u, t: Value(Rational(-6, 4), u.second), "-1.5 s"),
    ])
    def test_formatting(self, build, text):
        """Magnitude and symbol"""
        assert str(build(self.units, self)) == text

    def test_bracketed_name_uses_base_magnitude(self):
        """Without a symbol the magnitude is shown in base units"""
        v = 3.6 * self.units.kilogram * self.kmh
        assert v.x == Rational(36, 10)
        assert str(v) == "1 [kg^1][m^1][s^-1]"

    def test_area_sums(self):
        """Named area units keep their symbols"""
        a = 1 * self.square_meter + 50 * self.square_decimeter
        b = 50 * self.square_decimeter + 1 * self.square_meter
        assert str(a) == "1.5 m²"
        assert str(b) == "150 dm²"

    def test_dimensionless_ratio(self):
        """A scaled dimensionless value prints as a plain number"""
        assert str(6 * (self.units.meter / self.units.centimeter)) == "600"

    def test_format_spec(self):
        """Format specs apply to the float magnitude"""
        v = Value(Rational(1, 3), self.units.meter)
        assert f"{v:.3f}" == "0.333 m"
        assert f"{v}" == "0.333333333333333 m"

    def test_repr(self):
        """repr shows the stored magnitude and unit text"""
        assert repr(Value(2, self.units.meter)) == "Value(Rational(2, 1), 'm')"
