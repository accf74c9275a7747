"""
Momentum Service.

Linear momentum, impulse, and the impulse-momentum theorem check
F * deltaT == m * deltaV.
"""

from formulas.core import Param, formula, identity_holds
from formulas.services import FormulaService


@formula("momentum", "p = m*v",
         Param("m", "Mass (m)", non_negative=True), Param("v"))
def momentum(m, v):
    return m * v


@formula("impulse", "J = F*deltaT",
         Param("F"),
         Param("deltaT", "Time interval (deltaT)", non_negative=True))
def impulse(F, deltaT):
    return F * deltaT


@formula("impulse-momentum", "F*deltaT = m*deltaV",
         Param("F"),
         Param("deltaT", "Time interval (deltaT)", non_negative=True),
         Param("m", "Mass (m)", non_negative=True),
         Param("deltaV"),
         identity=True)
def impulse_momentum(F, deltaT, m, deltaV, tolerance):
    return identity_holds([F * deltaT, m * deltaV], tolerance)


class MomentumService(FormulaService):

    id = "momentum"
    name = "Momentum"
    description = "Linear momentum, impulse and the impulse-momentum theorem"
    formulas = (
        momentum,
        impulse,
        impulse_momentum,
    )
