"""
Oscillations Service.

Spring potential energy and the periods and frequencies of simple
harmonic oscillators.
"""

import math

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService


@formula("spring-pe", "U = (1/2) * k * deltaX^2",
         Param("k", "Spring constant (k)", non_negative=True),
         Param("deltaX"))
def spring_pe(k, deltaX):
    return 0.5 * k * deltaX * deltaX


@formula("sho-period", "T = 2*pi*sqrt(m / k)",
         Param("m", "Mass (m)", non_negative=True),
         Param("k", "Spring constant (k)", positive=True))
def sho_period(m, k):
    return 2 * math.pi * math.sqrt(m / k)


@formula("simple-pendulum-period", "T = 2*pi*sqrt(l / g)",
         Param("l", "Length (l)", non_negative=True),
         Param("g", positive=True, default=constants.G_EARTH))
def simple_pendulum_period(l, g):
    return 2 * math.pi * math.sqrt(l / g)


@formula("frequency", "f = 1 / T",
         Param("T", "Period (T)", non_zero=True, positive=True))
def frequency(T):
    return 1.0 / T


@formula("angular-frequency", "omega = 2*pi*f",
         Param("f", "Frequency (f)", non_negative=True))
def angular_frequency(f):
    return 2 * math.pi * f


class OscillationsService(FormulaService):

    id = "oscillations"
    name = "Oscillations"
    description = "Springs, pendulums, period and frequency"
    formulas = (
        spring_pe,
        sho_period,
        simple_pendulum_period,
        frequency,
        angular_frequency,
    )
