"""
Work, Energy and Power Service.

Angles are in radians.
"""

import math

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService


MASS = "Mass (m)"


@formula("work", "W = F * deltaS * cos(theta)",
         Param("F"), Param("deltaS"), Param("theta"))
def work(F, deltaS, theta):
    return F * deltaS * math.cos(theta)


@formula("kinetic-energy", "K = (1/2)*m*v^2",
         Param("m", MASS, non_negative=True), Param("v"))
def kinetic_energy(m, v):
    return 0.5 * m * v * v


@formula("kinetic-energy-from-momentum", "K = p^2 / (2*m)",
         Param("p"), Param("m", MASS, positive=True))
def kinetic_energy_from_momentum(p, m):
    return (p * p) / (2 * m)


@formula("gravitational-potential-energy", "deltaU = m*g*deltaH",
         Param("m", MASS, non_negative=True),
         Param("g", default=constants.G_EARTH),
         Param("deltaH"))
def gravitational_potential_energy(m, g, deltaH):
    return m * g * deltaH


@formula("efficiency", "eta = Wout / Ein",
         Param("Wout", "Work output (Wout)"),
         Param("Ein", "Energy input (Ein)", positive=True))
def efficiency(Wout, Ein):
    # |Wout| <= |Ein| is not enforced; ratios above 1 are returned as is.
    return Wout / Ein


@formula("power", "P = deltaW / deltaT",
         Param("deltaW"),
         Param("deltaT", "Time interval (deltaT)", positive=True))
def power(deltaW, deltaT):
    return deltaW / deltaT


@formula("power-velocity", "P = F * v * cos(theta)",
         Param("F"), Param("v"), Param("theta"))
def power_velocity(F, v, theta):
    return F * v * math.cos(theta)


class WorkEnergyService(FormulaService):

    id = "work_energy"
    name = "Work, Energy and Power"
    description = "Work, kinetic and potential energy, efficiency and power"
    formulas = (
        work,
        kinetic_energy,
        kinetic_energy_from_momentum,
        gravitational_potential_energy,
        efficiency,
        power,
        power_velocity,
    )
