"""
Special Relativity Service.

Lorentz factor, time dilation, length contraction, velocity addition,
relativistic energy, momentum and kinetic energy, and the longitudinal
relativistic Doppler shift.

Limiting-case policy for a massive particle:
    |v| >  c   PhysicalBoundError
    |v| == c   defined limit, returned as a result:
               gamma, dilated time, energy, KE -> Infinity
               momentum -> +/-Infinity (sign of v)
               contracted length -> 0
               Doppler wavelength -> Infinity (v_rel = +c), 0 (v_rel = -c)

Mass-based formulas reject m = 0: a massless particle must travel at c,
and even then its energy and momentum follow E = pc, not these forms.

c defaults to the exact SI speed of light and must be positive.
"""

import math

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService
from formulas.validation import (
    NotApplicableError,
    PhysicalBoundError,
    SingularityError,
)


def _c():
    return Param("c", "Speed of light (c)", non_zero=True, positive=True,
                 default=constants.C)


def _mass():
    return Param("m", "Mass (m)", non_negative=True)


def _check_speed(v, c, name="Velocity (v)"):
    """Raise if |v| > c; return True exactly at |v| == c."""
    if abs(v) > c:
        raise PhysicalBoundError(
            "{} cannot be greater than the speed of light (c).".format(name))
    return abs(v) == c


def _gamma(v, c):
    beta = v / c
    return 1.0 / math.sqrt(1.0 - beta * beta)


def _require_mass(m, v, c, redirect):
    if m != 0:
        return
    if abs(v) != c:
        raise NotApplicableError(
            "Massless particles (m=0) must travel at the speed of light (v=c).")
    raise NotApplicableError(
        "This formula applies to particles with rest mass (m > 0). "
        "For massless particles use {}.".format(redirect))


@formula("lorentz-factor", "gamma = 1 / sqrt(1 - v^2/c^2)",
         Param("v", "Velocity (v)"), _c())
def lorentz_factor(v, c):
    if _check_speed(v, c):
        return math.inf
    return _gamma(v, c)


@formula("time-dilation", "t = t0 / sqrt(1 - v^2/c^2)",
         Param("t0", "Proper time (t0)", non_negative=True),
         Param("v", "Velocity (v)"), _c())
def time_dilation(t0, v, c):
    if _check_speed(v, c):
        return math.inf
    return t0 * _gamma(v, c)


@formula("length-contraction", "L = L0 * sqrt(1 - v^2/c^2)",
         Param("L0", "Proper length (L0)", non_negative=True),
         Param("v", "Velocity (v)"), _c())
def length_contraction(L0, v, c):
    if _check_speed(v, c):
        return 0.0
    beta = v / c
    return L0 * math.sqrt(1.0 - beta * beta)


@formula("relativistic-velocity", "u' = (u + v) / (1 + u*v/c^2)",
         Param("u", "Velocity (u)"), Param("v", "Velocity (v)"), _c())
def relativistic_velocity(u, v, c):
    _check_speed(u, c, "Velocity (u)")
    _check_speed(v, c, "Velocity (v)")
    denominator = 1 + (u * v) / (c * c)
    if denominator == 0:
        raise SingularityError(
            "Velocities (u, v) give 1 + uv/c^2 = 0; "
            "the composed velocity is undefined.")
    return (u + v) / denominator


@formula("relativistic-energy", "E = m*c^2 / sqrt(1 - v^2/c^2)",
         _mass(), Param("v", "Velocity (v)"), _c())
def relativistic_energy(m, v, c):
    _check_speed(v, c)
    _require_mass(m, v, c, "the energy-momentum relation (E=pc)")
    if abs(v) == c:
        return math.inf
    return m * c * c * _gamma(v, c)


@formula("relativistic-momentum", "p = m*v / sqrt(1 - v^2/c^2)",
         _mass(), Param("v", "Velocity (v)"), _c())
def relativistic_momentum(m, v, c):
    _check_speed(v, c)
    _require_mass(m, v, c,
                  "photon-momentum-from-wavelength or the energy-momentum "
                  "relation (p=E/c)")
    if abs(v) == c:
        return math.copysign(math.inf, v)
    return m * v * _gamma(v, c)


@formula("energy-momentum", "E = sqrt((p*c)^2 + (m*c^2)^2)",
         Param("p", "Momentum (p)", non_negative=True), _mass(), _c())
def energy_momentum(p, m, c):
    pc = p * c
    mc2 = m * c * c
    return math.hypot(pc, mc2)


@formula("mass-energy", "E0 = m*c^2", _mass(), _c())
def mass_energy(m, c):
    return m * c * c


@formula("relativistic-ke", "K = (gamma - 1) * m*c^2",
         _mass(), Param("v", "Velocity (v)"), _c())
def relativistic_ke(m, v, c):
    _check_speed(v, c)
    _require_mass(m, v, c, "the energy-momentum relation (E=pc)")
    if v == 0:
        return 0.0
    if abs(v) == c:
        return math.inf
    return (_gamma(v, c) - 1) * m * c * c


@formula("relativistic-doppler-effect",
         "lambda = lambda0 * sqrt((1 + v_rel/c) / (1 - v_rel/c))",
         Param("lambda0", "Emitted wavelength (lambda0)", positive=True),
         Param("v_rel", "Relative velocity (v_rel)"), _c())
def relativistic_doppler_effect(lambda0, v_rel, c):
    """v_rel > 0 is recession (redshift), v_rel < 0 approach."""
    if _check_speed(v_rel, c, "Relative velocity (v_rel)"):
        return math.inf if v_rel > 0 else 0.0
    beta = v_rel / c
    return lambda0 * math.sqrt((1 + beta) / (1 - beta))


class RelativityService(FormulaService):

    id = "relativity"
    name = "Special Relativity"
    description = "Lorentz factor, dilation, contraction and relativistic dynamics"
    formulas = (
        lorentz_factor,
        time_dilation,
        length_contraction,
        relativistic_velocity,
        relativistic_energy,
        relativistic_momentum,
        energy_momentum,
        mass_energy,
        relativistic_ke,
        relativistic_doppler_effect,
    )
