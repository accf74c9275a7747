"""
Tests for special relativity, quantum and nuclear formulas.

Limiting cases at v = c are returned as results (Infinity or 0);
anything faster than light is rejected.
"""

import math
import pytest

from formulas import constants
from formulas.services.nuclear import activity, half_life
from formulas.services.quantum import (
    photoelectric_effect_ke,
    photon_energy_from_frequency,
    photon_momentum_from_wavelength,
    rydberg_transition,
)
from formulas.services.relativity import (
    energy_momentum,
    length_contraction,
    lorentz_factor,
    relativistic_doppler_effect,
    relativistic_energy,
    relativistic_ke,
    relativistic_momentum,
    relativistic_velocity,
    time_dilation,
)
from formulas.validation import (
    DomainViolation,
    NotApplicableError,
    PhysicalBoundError,
    SingularityError,
)

C = constants.C


def value(f, /, **payload):
    return f.evaluate(payload).value


class TestLorentz:

    def test_rest(self):
        assert value(lorentz_factor, v=0) == 1.0

    def test_six_tenths_c(self):
        assert value(lorentz_factor, v=0.6 * C) == pytest.approx(1.25)

    def test_at_c_is_infinite(self):
        assert value(lorentz_factor, v=C) == math.inf

    def test_faster_than_light(self):
        with pytest.raises(PhysicalBoundError) as exc:
            lorentz_factor.evaluate({"v": 3e8})
        assert exc.value.message == \
            "Velocity (v) cannot be greater than the speed of light (c)."
        assert exc.value.code == "physical_bound"

    def test_custom_c(self):
        assert value(lorentz_factor, v=0.6, c=1) == pytest.approx(1.25)

    def test_zero_c(self):
        with pytest.raises(DomainViolation):
            lorentz_factor.evaluate({"v": 0, "c": 0})


class TestDilationAndContraction:

    def test_time_dilation(self):
        assert value(time_dilation, t0=1, v=0.6 * C) == pytest.approx(1.25)
        assert value(time_dilation, t0=1, v=-C) == math.inf

    def test_length_contraction(self):
        assert value(length_contraction, L0=1, v=0.6 * C) == \
            pytest.approx(0.8)
        assert value(length_contraction, L0=1, v=C) == 0.0


class TestVelocityAddition:

    def test_half_c_twice(self):
        assert value(relativistic_velocity, u=0.5 * C, v=0.5 * C) == \
            pytest.approx(0.8 * C, rel=1e-12)

    def test_light_plus_anything_is_light(self):
        assert value(relativistic_velocity, u=C, v=0.5 * C) == \
            pytest.approx(C, rel=1e-12)

    def test_opposite_light_speeds(self):
        with pytest.raises(SingularityError):
            relativistic_velocity.evaluate({"u": C, "v": -C})

    def test_u_faster_than_light(self):
        with pytest.raises(PhysicalBoundError) as exc:
            relativistic_velocity.evaluate({"u": 2 * C, "v": 0})
        assert "Velocity (u)" in exc.value.message


class TestRelativisticDynamics:

    def test_energy_at_rest(self):
        assert value(relativistic_energy, m=1, v=0) == pytest.approx(
            C * C, rel=1e-4)

    def test_energy_at_c(self):
        assert value(relativistic_energy, m=1, v=C) == math.inf

    def test_massless_below_c(self):
        with pytest.raises(NotApplicableError) as exc:
            relativistic_energy.evaluate({"m": 0, "v": 1})
        assert "must travel at the speed of light" in exc.value.message

    def test_massless_at_c_redirects(self):
        with pytest.raises(NotApplicableError) as exc:
            relativistic_momentum.evaluate({"m": 0, "v": C})
        assert "rest mass" in exc.value.message

    def test_momentum_sign_at_c(self):
        assert value(relativistic_momentum, m=1, v=-C) == -math.inf

    def test_ke_at_rest(self):
        assert value(relativistic_ke, m=1, v=0) == 0.0

    def test_ke_at_c(self):
        assert value(relativistic_ke, m=1, v=C) == math.inf

    def test_ke_low_speed_is_classical(self):
        ke = value(relativistic_ke, m=1, v=1000)
        assert ke == pytest.approx(0.5 * 1000 ** 2, rel=1e-4)

    def test_energy_momentum_massless(self):
        assert value(energy_momentum, p=1, m=0) == pytest.approx(C)

    def test_energy_momentum_at_rest(self):
        assert value(energy_momentum, p=0, m=1) == pytest.approx(
            C * C, rel=1e-4)


class TestRelativisticDoppler:

    def test_recession(self):
        lam = value(relativistic_doppler_effect, lambda0=500e-9,
                    v_rel=0.6 * C)
        assert lam == pytest.approx(1e-6, rel=1e-4)

    def test_limits(self):
        assert value(relativistic_doppler_effect, lambda0=500e-9,
                     v_rel=C) == math.inf
        assert value(relativistic_doppler_effect, lambda0=500e-9,
                     v_rel=-C) == 0.0


class TestQuantum:

    def test_photon_energy(self):
        assert value(photon_energy_from_frequency, f=1e15) == \
            pytest.approx(constants.H * 1e15, rel=1e-4)

    def test_photon_momentum(self):
        p = photon_momentum_from_wavelength.evaluate({"lambda": 500e-9})
        assert p.value == pytest.approx(constants.H / 500e-9, rel=1e-4)

    def test_photoelectric_above_threshold(self):
        assert value(photoelectric_effect_ke, photonEnergy=5, phi=2) == 3.0

    def test_photoelectric_below_threshold(self):
        assert value(photoelectric_effect_ke, photonEnergy=2, phi=5) == 0.0

    def test_lyman_alpha(self):
        assert value(rydberg_transition, nInitial=1, nFinal=2) == \
            pytest.approx(10.2043, abs=1e-4)

    def test_emission_is_negative(self):
        assert value(rydberg_transition, nInitial=2, nFinal=1) < 0

    def test_hydrogen_like_scaling(self):
        h = value(rydberg_transition, nInitial=1, nFinal=2)
        he = value(rydberg_transition, nInitial=1, nFinal=2, atomicNumber=2)
        assert he == pytest.approx(4 * h, abs=1e-3)

    def test_wavenumber_constant(self):
        k = value(rydberg_transition, nInitial=1, nFinal=2,
                  constant=constants.RYDBERG_CONSTANT_M_INV)
        assert k == pytest.approx(0.75 * constants.RYDBERG_CONSTANT_M_INV,
                                  rel=1e-4)

    def test_same_level(self):
        with pytest.raises(DomainViolation) as exc:
            rydberg_transition.evaluate({"nInitial": 2, "nFinal": 2})
        assert "must be different" in exc.value.message
        assert exc.value.code == "degenerate_transition"

    def test_fractional_level(self):
        with pytest.raises(DomainViolation) as exc:
            rydberg_transition.evaluate({"nInitial": 1.5, "nFinal": 2})
        assert exc.value.code == "must_be_integer"

    def test_zero_level(self):
        with pytest.raises(DomainViolation) as exc:
            rydberg_transition.evaluate({"nInitial": 0, "nFinal": 2})
        assert exc.value.code == "must_be_positive"


class TestNuclear:

    def test_two_half_lives(self):
        assert value(half_life, N0=100, tValue=2, Thalf=1) == 25.0

    def test_long_decay_underflows_to_zero(self):
        assert value(half_life, N0=100, tValue=1e6, Thalf=1) == 0.0

    def test_activity_requires_whole_decays(self):
        with pytest.raises(DomainViolation) as exc:
            activity.evaluate({"nValue": 1.5, "tValue": 1})
        assert exc.value.code == "must_be_integer"
