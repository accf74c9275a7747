"""
Kinematics and Dynamics Service.

Average rates, the constant-acceleration equations of motion, Newton's
second law, weight, and dry friction.
"""

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService


TIME_INTERVAL = "Time interval (deltaT)"


@formula("velocity", "v = deltaS / deltaT",
         Param("deltaS", "Displacement (deltaS)"),
         Param("deltaT", TIME_INTERVAL, non_zero=True, positive=True))
def velocity(deltaS, deltaT):
    return deltaS / deltaT


@formula("acceleration", "a = deltaV / deltaT",
         Param("deltaV", "Change in velocity (deltaV)"),
         Param("deltaT", TIME_INTERVAL, non_zero=True, positive=True))
def acceleration(deltaV, deltaT):
    return deltaV / deltaT


@formula("motion-v", "v = v0 + a*t",
         Param("v0"), Param("a"), Param("t"))
def motion_v(v0, a, t):
    return v0 + a * t


@formula("motion-s", "s = s0 + v0*t + (1/2)*a*t^2",
         Param("s0"), Param("v0"), Param("t"), Param("a"))
def motion_s(s0, v0, t, a):
    return s0 + v0 * t + 0.5 * a * t * t


@formula("motion-v2", "v^2 = v0^2 + 2*a*(s - s0)",
         Param("v0"), Param("a"), Param("s"), Param("s0"))
def motion_v2(v0, a, s, s0):
    """Returns v squared; the sign of v is not recoverable."""
    return v0 * v0 + 2 * a * (s - s0)


@formula("motion-v-avg", "v_avg = (v + v0) / 2",
         Param("v"), Param("v0"))
def motion_v_avg(v, v0):
    return 0.5 * (v + v0)


@formula("force", "F = m*a",
         Param("m", "Mass (m)", non_negative=True), Param("a"))
def force(m, a):
    return m * a


@formula("weight", "W = m*g",
         Param("m", "Mass (m)", non_negative=True),
         Param("g", default=constants.G_EARTH))
def weight(m, g):
    return m * g


@formula("dry-friction-static-max", "f_s,max = muS * N",
         Param("muS", "Static friction coefficient (muS)", non_negative=True),
         Param("N", "Normal force (N)", non_negative=True))
def dry_friction_static_max(muS, N):
    return muS * N


@formula("dry-friction-kinetic", "f_k = muK * N",
         Param("muK", "Kinetic friction coefficient (muK)", non_negative=True),
         Param("N", "Normal force (N)", non_negative=True))
def dry_friction_kinetic(muK, N):
    return muK * N


class MechanicsService(FormulaService):

    id = "mechanics"
    name = "Kinematics and Dynamics"
    description = "Equations of motion, Newton's second law and friction"
    formulas = (
        velocity,
        acceleration,
        motion_v,
        motion_s,
        motion_v2,
        motion_v_avg,
        force,
        weight,
        dry_friction_static_max,
        dry_friction_kinetic,
    )
