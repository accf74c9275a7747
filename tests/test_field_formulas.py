"""
Tests for waves, optics and electromagnetism formulas, and for the
near-zero radius behaviour of every inverse-distance formula.
"""

import math
import pytest

from formulas import constants
from formulas.services.circular_motion import centripetal_acceleration
from formulas.services.electromagnetism import (
    biot_savart_law,
    capacitive_pe,
    capacitors_in_series,
    coulombs_law,
    cylindrical_capacitor,
    electric_power,
    impedance,
    plate_capacitor,
    resistors_in_parallel,
    resistors_in_series,
    spherical_capacitor,
    straight_wire,
)
from formulas.services.gravitation import (
    gravitational_field,
    gravitational_pe,
    gravitational_potential,
    universal_gravitation,
)
from formulas.services.optics import (
    cerenkov_angle,
    critical_angle,
    image_location,
    interference_fringes,
    snells_law,
)
from formulas.services.waves import (
    doppler_effect,
    intensity_level,
    mach_angle,
    periodic_wave_velocity,
)
from formulas.validation import (
    DomainViolation,
    InputTypeError,
    NotApplicableError,
    PhysicalBoundError,
    SingularityError,
)


def value(f, /, **payload):
    return f.evaluate(payload).value


class TestWaves:

    def test_wave_speed_uses_lambda_key(self):
        result = periodic_wave_velocity.evaluate({"f": 440, "lambda": 0.78})
        assert result.value == pytest.approx(343.2)
        assert result.inputs["lambda"] == 0.78

    def test_intensity_level_reference(self):
        assert value(intensity_level, I=1e-12) == 0.0
        assert value(intensity_level, I=1e-6) == pytest.approx(60.0)

    def test_doppler_approaching_source(self):
        assert value(doppler_effect, c=340, vo=0, vs=40) == \
            pytest.approx(340 / 300, abs=1e-4)

    def test_doppler_source_at_wave_speed(self):
        with pytest.raises(SingularityError):
            doppler_effect.evaluate({"c": 340, "vo": 0, "vs": 340})

    def test_mach_angle(self):
        assert value(mach_angle, c=340, v=680) == pytest.approx(
            math.pi / 6, abs=1e-4)

    def test_mach_angle_subsonic(self):
        with pytest.raises(NotApplicableError):
            mach_angle.evaluate({"c": 340, "v": 100})


class TestOptics:

    def test_fringes(self):
        x = value(interference_fringes, d=1e-4, L=1, n=1,
                  **{"lambda": 500e-9})
        assert x == pytest.approx(5e-3, rel=1e-6)

    def test_snell_holds(self):
        assert value(snells_law, n1=1.5, theta1=0.3, n2=1.5,
                     theta2=0.3) is True

    def test_snell_fails(self):
        assert value(snells_law, n1=1.0, theta1=0.5, n2=1.5,
                     theta2=0.5) is False

    def test_thin_lens(self):
        assert value(image_location, f=10, doValue=20, diValue=20) is True
        assert value(image_location, f=10, doValue=20, diValue=30) is False

    def test_critical_angle(self):
        assert value(critical_angle, n1=2, n2=1) == pytest.approx(
            math.pi / 6, abs=1e-4)

    def test_no_critical_angle(self):
        with pytest.raises(NotApplicableError):
            critical_angle.evaluate({"n1": 1.0, "n2": 1.5})

    def test_cerenkov_below_threshold(self):
        with pytest.raises(PhysicalBoundError):
            cerenkov_angle.evaluate({"n": 1.0, "vp": constants.C / 2})

    def test_cerenkov_in_water(self):
        theta = value(cerenkov_angle, n=1.33, vp=0.99 * constants.C)
        assert theta == pytest.approx(math.acos(1 / (1.33 * 0.99)),
                                      abs=1e-4)


class TestElectrostatics:

    def test_coulomb_default_constant(self):
        assert value(coulombs_law, q1=1, q2=1, r=1) == pytest.approx(
            constants.K_COULOMB, rel=1e-9)

    def test_coulomb_zero_distance(self):
        with pytest.raises(DomainViolation):
            coulombs_law.evaluate({"q1": 1, "q2": 1, "r": 0})

    def test_cylindrical_geometry(self):
        with pytest.raises(DomainViolation) as exc:
            cylindrical_capacitor.evaluate(
                {"kEpsilon": 1, "l": 1, "r1": 2, "r2": 1})
        assert exc.value.code == "invalid_geometry"

    def test_spherical_geometry(self):
        with pytest.raises(DomainViolation) as exc:
            spherical_capacitor.evaluate({"kEpsilon": 1, "r1": 1, "r2": 1})
        assert exc.value.code == "invalid_geometry"

    def test_plate_capacitor_default_epsilon0(self):
        c = value(plate_capacitor, kEpsilon=2, A=1, d=0.5)
        assert c == pytest.approx(4 * constants.EPSILON_0, rel=1e-4)

    def test_capacitors_accept_epsilon0_override(self):
        assert value(plate_capacitor, kEpsilon=1, A=2, d=1,
                     epsilon0=1) == 2.0
        assert value(cylindrical_capacitor, kEpsilon=1, l=1, r1=1,
                     r2=math.e, epsilon0=1) == pytest.approx(2 * math.pi)
        assert value(spherical_capacitor, kEpsilon=1, r1=1, r2=2,
                     epsilon0=1) == pytest.approx(8 * math.pi)

    def test_epsilon0_must_be_positive(self):
        with pytest.raises(DomainViolation) as exc:
            plate_capacitor.evaluate(
                {"kEpsilon": 1, "A": 1, "d": 1, "epsilon0": 0})
        assert exc.value.code == "must_be_positive"

    def test_spherical_capacitor(self):
        c = value(spherical_capacitor, kEpsilon=1, r1=1, r2=2)
        assert c == pytest.approx(8 * math.pi * constants.EPSILON_0,
                                  rel=1e-4)

    def test_capacitor_energy_forms(self):
        assert value(capacitive_pe, Q=2, V=4, C=0.5) is True
        assert value(capacitive_pe, Q=2, V=4, C=1) is False


class TestCircuits:

    def test_series(self):
        assert value(resistors_in_series, resistances=[1, 2, 3]) == 6.0

    def test_parallel(self):
        assert value(resistors_in_parallel, resistances=[2, 2]) == 1.0

    def test_single_component(self):
        assert value(capacitors_in_series, capacitances=[4e-6]) == \
            pytest.approx(4e-6)

    def test_zero_component(self):
        with pytest.raises(DomainViolation) as exc:
            resistors_in_parallel.evaluate({"resistances": [2, 0]})
        assert exc.value.message == \
            "resistances[1] must be a positive number."

    def test_empty_list(self):
        with pytest.raises(InputTypeError):
            resistors_in_series.evaluate({"resistances": []})

    def test_result_is_builtin_float(self):
        result = value(resistors_in_series, resistances=[1, 2])
        assert type(result) is float

    def test_power_forms(self):
        assert value(electric_power, V=10, I=2, R=5) is True
        assert value(electric_power, V=10, I=2, R=4) is False

    def test_impedance(self):
        assert value(impedance, R=3, XL=6, XC=2) == 5.0


class TestMagnetism:

    def test_straight_wire_default_mu0(self):
        assert value(straight_wire, I=1, r=1) == pytest.approx(2e-7,
                                                               rel=1e-4)


RADIAL_FORMULAS = [
    universal_gravitation, gravitational_field, gravitational_pe,
    gravitational_potential, coulombs_law, biot_savart_law, straight_wire,
    centripetal_acceleration,
]


@pytest.mark.parametrize("f", RADIAL_FORMULAS, ids=lambda f: f.id)
class TestSmallRadius:
    """A radius just above zero gives a large but finite result."""

    @pytest.mark.parametrize("r", [1e-3, 1e-6, 1e-12])
    def test_finite_near_zero(self, f, r):
        payload = {p.name: 1 for p in f.params if p.default is None}
        payload["r"] = r
        result = f.evaluate(payload).value
        assert math.isfinite(result)
        assert result != 0

    def test_zero_rejected(self, f):
        payload = {p.name: 1 for p in f.params if p.default is None}
        payload["r"] = 0
        with pytest.raises(DomainViolation):
            f.evaluate(payload)
