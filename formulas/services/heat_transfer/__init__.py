"""
Heat Transfer Service.

Conduction through a slab, net radiated power (Stefan-Boltzmann), and
Wien's displacement law in wavelength and frequency form.
"""

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService


def _kelvin(name="T"):
    return Param(name, "Temperature ({})".format(name), non_negative=True)


@formula("thermal-conduction", "P = k * A * deltaT / L",
         Param("k", "Thermal conductivity (k)", non_negative=True),
         Param("A", "Area (A)", non_negative=True),
         Param("deltaT"),
         Param("L", "Thickness (L)", positive=True))
def thermal_conduction(k, A, deltaT, L):
    return (k * A * deltaT) / L


@formula("stefan-boltzmann-law", "P = epsilon * sigma * A * (T^4 - T0^4)",
         Param("epsilon", "Emissivity (epsilon)", non_negative=True),
         Param("sigma", "Stefan-Boltzmann constant (sigma)", positive=True,
               default=constants.SIGMA),
         Param("A", "Area (A)", non_negative=True),
         _kelvin("T"), _kelvin("T0"))
def stefan_boltzmann_law(epsilon, sigma, A, T, T0):
    t2 = T * T
    t02 = T0 * T0
    return epsilon * sigma * A * (t2 * t2 - t02 * t02)


@formula("wien-law-lambda-max", "lambda_max = b / T",
         Param("b", "Wien constant (b)", positive=True,
               default=constants.WIEN_B),
         Param("T", "Temperature (T)", positive=True))
def wien_law_lambda_max(b, T):
    return b / T


@formula("wien-law-f-max", "f_max = b' * T",
         Param("bPrime", "Wien frequency constant (bPrime)", positive=True,
               default=constants.WIEN_B_PRIME),
         _kelvin("T"))
def wien_law_f_max(bPrime, T):
    return bPrime * T


class HeatTransferService(FormulaService):

    id = "heat_transfer"
    name = "Heat Transfer"
    description = "Conduction, thermal radiation and Wien's law"
    subjects = ("physics", "engineering")
    formulas = (
        thermal_conduction,
        stefan_boltzmann_law,
        wien_law_lambda_max,
        wien_law_f_max,
    )
