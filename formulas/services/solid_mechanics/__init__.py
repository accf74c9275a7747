"""
Solid Mechanics Service.

Hooke's law and the three elastic moduli (Young's, shear, bulk). Each
modulus divides by a deformation, which may not be zero; cross-section
areas and reference dimensions must be positive.

Served under both /physics and /engineering.
"""

from formulas.core import Param, formula
from formulas.services import FormulaService


AREA = "Area (A)"


@formula("hookes-law", "F = -k * deltaX",
         Param("k", "Spring constant (k)", non_negative=True),
         Param("deltaX", "Displacement (deltaX)"))
def hookes_law(k, deltaX):
    return -k * deltaX


@formula("youngs-modulus", "E = (F / A) / (deltaL / L0)",
         Param("F"),
         Param("deltaL", "Change in length (deltaL)", non_zero=True),
         Param("A", AREA, positive=True),
         Param("L0", "Original length (L0)", positive=True))
def youngs_modulus(F, deltaL, A, L0):
    return (F * L0) / (A * deltaL)


@formula("shear-modulus", "G = (F / A) / (deltaX / y)",
         Param("F"),
         Param("deltaX", "Shear displacement (deltaX)", non_zero=True),
         Param("A", AREA, positive=True),
         Param("y", "Height (y)", positive=True))
def shear_modulus(F, deltaX, A, y):
    return (F * y) / (A * deltaX)


@formula("bulk-modulus", "K = (F / A) / (deltaV / V0)",
         Param("F"),
         Param("deltaV", "Change in volume (deltaV)", non_zero=True),
         Param("A", AREA, positive=True),
         Param("V0", "Original volume (V0)", positive=True))
def bulk_modulus(F, deltaV, A, V0):
    return (F * V0) / (A * deltaV)


class SolidMechanicsService(FormulaService):

    id = "solid_mechanics"
    name = "Solid Mechanics"
    description = "Hooke's law and elastic moduli"
    subjects = ("physics", "engineering")
    formulas = (
        hookes_law,
        youngs_modulus,
        shear_modulus,
        bulk_modulus,
    )
