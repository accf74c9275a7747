"""
Thermal Physics and Thermodynamics Service.

Thermal expansion, heat, the kinetic theory of gases, and the first and
second laws (work, internal energy, efficiencies and coefficients of
performance). Absolute temperatures are in kelvin and may not be
negative.

ideal-gas-law is an identity check: True when P*V agrees with n*R*T.
Exact floating-point equality is almost never met by measured values,
so agreement is judged with a relative tolerance (default 1e-9);
pass tolerance = 0 for a bit-exact comparison.
"""

import math

from formulas import constants
from formulas.core import Param, formula, identity_holds
from formulas.services import FormulaService
from formulas.validation import SingularityError


def _kelvin(name, label):
    return Param(name, "{} ({})".format(label, name), non_negative=True)


def _boltzmann():
    return Param("k", "Boltzmann constant (k)", positive=True,
                 default=constants.K_BOLTZMANN)


def _molecular_mass():
    return Param("m", "Molecular mass (m)", positive=True)


@formula("solid-expansion-length", "deltaL = alpha * L0 * deltaT",
         Param("alpha"), Param("L0", "Initial length (L0)", non_negative=True),
         Param("deltaT"))
def solid_expansion_length(alpha, L0, deltaT):
    return alpha * L0 * deltaT


@formula("solid-expansion-area", "deltaA = 2 * alpha * A0 * deltaT",
         Param("alpha"), Param("A0", "Initial area (A0)", non_negative=True),
         Param("deltaT"))
def solid_expansion_area(alpha, A0, deltaT):
    return 2 * alpha * A0 * deltaT


@formula("solid-expansion-volume", "deltaV = 3 * alpha * V0 * deltaT",
         Param("alpha"), Param("V0", "Initial volume (V0)", non_negative=True),
         Param("deltaT"))
def solid_expansion_volume(alpha, V0, deltaT):
    return 3 * alpha * V0 * deltaT


@formula("liquid-expansion", "deltaV = beta * V0 * deltaT",
         Param("beta"), Param("V0", "Initial volume (V0)", non_negative=True),
         Param("deltaT"))
def liquid_expansion(beta, V0, deltaT):
    return beta * V0 * deltaT


@formula("sensible-heat", "Q = m * c * deltaT",
         Param("m", "Mass (m)", non_negative=True),
         Param("c", "Specific heat (c)", non_negative=True),
         Param("deltaT"))
def sensible_heat(m, c, deltaT):
    return m * c * deltaT


@formula("latent-heat", "Q = m * L",
         Param("m", "Mass (m)", non_negative=True), Param("L"))
def latent_heat(m, L):
    return m * L


@formula("ideal-gas-law", "P * V = n * R * T",
         Param("P", "Pressure (P)", non_negative=True),
         Param("V", "Volume (V)", non_negative=True),
         Param("n", "Amount of substance (n)", non_negative=True),
         Param("R", "Gas constant (R)", positive=True,
               default=constants.R_GAS),
         _kelvin("T", "Temperature"),
         identity=True)
def ideal_gas_law(P, V, n, R, T, tolerance):
    return identity_holds([P * V, n * R * T], tolerance)


@formula("molecular-ke", "K = (3/2) * k * T",
         _boltzmann(), _kelvin("T", "Temperature"))
def molecular_ke(k, T):
    return 1.5 * k * T


@formula("molecular-speed-vp", "v_p = sqrt(2 * k * T / m)",
         _boltzmann(), _kelvin("T", "Temperature"), _molecular_mass())
def molecular_speed_vp(k, T, m):
    return math.sqrt((2 * k * T) / m)


@formula("molecular-speed-avg", "v_avg = sqrt(8 * k * T / (pi * m))",
         _boltzmann(), _kelvin("T", "Temperature"), _molecular_mass())
def molecular_speed_avg(k, T, m):
    return math.sqrt((8 * k * T) / (math.pi * m))


@formula("molecular-speed-rms", "v_rms = sqrt(3 * k * T / m)",
         _boltzmann(), _kelvin("T", "Temperature"), _molecular_mass())
def molecular_speed_rms(k, T, m):
    return math.sqrt((3 * k * T) / m)


@formula("internal-energy-change", "deltaU = (3/2) * nR * deltaT",
         Param("nR"), Param("deltaT"))
def internal_energy_change(nR, deltaT):
    # monatomic ideal gas
    return 1.5 * nR * deltaT


@formula("thermodynamic-work", "W = -P * deltaV",
         Param("P", "Pressure (P)"), Param("deltaV"))
def thermodynamic_work(P, deltaV):
    # constant pressure
    return -P * deltaV


@formula("efficiency-real", "eta = 1 - QC / QH",
         Param("QC", "Heat rejected (QC)", non_negative=True),
         Param("QH", "Heat absorbed (QH)", positive=True))
def efficiency_real(QC, QH):
    return 1 - QC / QH


@formula("efficiency-ideal", "eta = 1 - TC / TH",
         _kelvin("TC", "Cold reservoir temperature"),
         Param("TH", "Hot reservoir temperature (TH)", positive=True))
def efficiency_ideal(TC, TH):
    return 1 - TC / TH


@formula("cop-real", "COP = QC / (QH - QC)",
         Param("QC", "Heat removed (QC)", non_negative=True),
         Param("QH", "Heat delivered (QH)", non_negative=True))
def cop_real(QC, QH):
    if QH == QC:
        raise SingularityError(
            "Heat delivered (QH) equals heat removed (QC); "
            "no work input, COP is undefined.")
    return QC / (QH - QC)


@formula("cop-ideal", "COP = TC / (TH - TC)",
         _kelvin("TC", "Cold reservoir temperature"),
         _kelvin("TH", "Hot reservoir temperature"))
def cop_ideal(TC, TH):
    if TH == TC:
        raise SingularityError(
            "Hot and cold reservoir temperatures (TH, TC) are equal; "
            "COP is undefined.")
    return TC / (TH - TC)


class ThermodynamicsService(FormulaService):

    id = "thermodynamics"
    name = "Thermal Physics and Thermodynamics"
    description = "Expansion, heat, kinetic theory, efficiency and COP"
    subjects = ("physics", "engineering")
    formulas = (
        solid_expansion_length,
        solid_expansion_area,
        solid_expansion_volume,
        liquid_expansion,
        sensible_heat,
        latent_heat,
        ideal_gas_law,
        molecular_ke,
        molecular_speed_vp,
        molecular_speed_avg,
        molecular_speed_rms,
        internal_energy_change,
        thermodynamic_work,
        efficiency_real,
        efficiency_ideal,
        cop_real,
        cop_ideal,
    )
