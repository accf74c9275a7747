"""
Tests for the physical constants table.

Validates that the constants injected as formula defaults match
CODATA values.
"""

import math

from formulas import constants
from formulas.constants import (
    C, G, G_EARTH, H, K_BOLTZMANN, K_COULOMB, MU_0, R_GAS,
    RYDBERG_ENERGY_EV, SIGMA, TABLE, WIEN_B, WIEN_B_PRIME,
)


class TestPhysicalConstants:
    """Verify fundamental constants are at expected values."""

    def test_speed_of_light_exact(self):
        assert C == 299792458.0

    def test_gravitational_constant(self):
        assert abs(G - 6.67430e-11) / 6.67430e-11 < 1e-5

    def test_planck_exact(self):
        assert abs(H - 6.62607015e-34) / 6.62607015e-34 < 1e-12

    def test_boltzmann_exact(self):
        assert abs(K_BOLTZMANN - 1.380649e-23) / 1.380649e-23 < 1e-12

    def test_gas_constant(self):
        assert abs(R_GAS - 8.314462618) / 8.314462618 < 1e-9

    def test_stefan_boltzmann(self):
        assert abs(SIGMA - 5.670374419e-8) / 5.670374419e-8 < 1e-9

    def test_standard_gravity(self):
        assert G_EARTH == 9.80665

    def test_wien_constants(self):
        assert abs(WIEN_B - 2.897771955e-3) / 2.897771955e-3 < 1e-9
        assert abs(WIEN_B_PRIME - 5.878925757e10) / 5.878925757e10 < 1e-9

    def test_rydberg_energy(self):
        assert abs(RYDBERG_ENERGY_EV - 13.605693122994) < 1e-6


class TestDerivedConstants:

    def test_coulomb_constant(self):
        assert abs(K_COULOMB - 8.9875517923e9) / 8.9875517923e9 < 1e-9

    def test_vacuum_permeability(self):
        assert MU_0 == 4 * math.pi * 1e-7


class TestTable:

    def test_table_is_read_only(self):
        try:
            TABLE["c"] = 1.0
        except TypeError:
            pass
        else:
            raise AssertionError("constants table accepted a write")
        assert TABLE["c"] == C

    def test_as_dict_is_a_copy(self):
        d = constants.as_dict()
        d["c"] = 1.0
        assert TABLE["c"] == C
