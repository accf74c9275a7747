"""
Gravitation Service.

Newtonian point-mass gravity. Every formula has an inverse-square or
inverse-linear radial term, so the separation r must be strictly
positive. G defaults to the CODATA value.

Sign convention: forces, fields and energies are negative (attractive,
zero at infinity).
"""

import math

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService


def _G():
    return Param("G", "Gravitational constant (G)", positive=True,
                 default=constants.G)


def _mass(name="m"):
    return Param(name, "Mass ({})".format(name), non_negative=True)


def _distance():
    return Param("r", "Distance (r)", non_zero=True, positive=True)


@formula("universal-gravitation", "F = -G * m1 * m2 / r^2",
         _G(), _mass("m1"), _mass("m2"), _distance())
def universal_gravitation(G, m1, m2, r):
    return (-G * m1 * m2) / (r * r)


@formula("gravitational-field", "g = -G * m / r^2",
         _G(), _mass(), _distance())
def gravitational_field(G, m, r):
    return (-G * m) / (r * r)


@formula("gravitational-pe", "U = -G * m1 * m2 / r",
         _G(), _mass("m1"), _mass("m2"), _distance())
def gravitational_pe(G, m1, m2, r):
    return (-G * m1 * m2) / r


@formula("gravitational-potential", "V = -G * m / r",
         _G(), _mass(), _distance())
def gravitational_potential(G, m, r):
    return (-G * m) / r


@formula("orbital-speed", "v = sqrt(G * m / r)",
         _G(), _mass(), _distance())
def orbital_speed(G, m, r):
    return math.sqrt((G * m) / r)


@formula("escape-speed", "v = sqrt(2 * G * m / r)",
         _G(), _mass(), _distance())
def escape_speed(G, m, r):
    return math.sqrt((2 * G * m) / r)


class GravitationService(FormulaService):

    id = "gravitation"
    name = "Gravitation"
    description = "Newtonian gravity: force, field, potential and orbits"
    formulas = (
        universal_gravitation,
        gravitational_field,
        gravitational_pe,
        gravitational_potential,
        orbital_speed,
        escape_speed,
    )
