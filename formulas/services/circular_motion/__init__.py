"""
Circular Motion Service.

Centripetal acceleration of a body on a circular path, from either its
tangential speed or its angular speed:

    a_c = v^2 / r
    a_c = omega^2 * r
"""

from formulas.core import Param, formula
from formulas.services import FormulaService


RADIUS = "Radius (r)"


@formula("centripetal-acceleration", "a_c = v^2 / r",
         Param("v", "Velocity (v)"),
         Param("r", RADIUS, non_zero=True, positive=True))
def centripetal_acceleration(v, r):
    return (v * v) / r


@formula("centripetal-acceleration-angular", "a_c = omega^2 * r",
         Param("omega", "Angular velocity (omega)"),
         Param("r", RADIUS, non_negative=True))
def centripetal_acceleration_angular(omega, r):
    return omega * omega * r


class CircularMotionService(FormulaService):

    id = "circular_motion"
    name = "Circular Motion"
    description = "Centripetal acceleration from linear or angular speed"
    formulas = (
        centripetal_acceleration,
        centripetal_acceleration_angular,
    )
