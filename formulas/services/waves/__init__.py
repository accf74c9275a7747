"""
Waves and Sound Service.

Wave speed, intensity and the decibel scales, the acoustic Doppler
factor and the Mach cone half-angle.

The Doppler formula returns the ratio f_observed / f_source with the
sign convention that vo > 0 is an observer moving toward the source and
vs > 0 a source moving toward the observer.
"""

import math

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService
from formulas.validation import NotApplicableError, SingularityError


@formula("periodic-wave-velocity", "v = f * lambda",
         Param("f", "Frequency (f)", non_negative=True),
         Param("lambda", "Wavelength (lambda)", non_negative=True,
               kwarg="wavelength"))
def periodic_wave_velocity(f, wavelength):
    return f * wavelength


@formula("intensity", "I = P_avg / A",
         Param("avgPower", "Average power (avgPower)", non_negative=True),
         Param("A", "Area (A)", positive=True))
def intensity(avgPower, A):
    return avgPower / A


@formula("intensity-level", "L = 10 * log10(I / I0)",
         Param("I", "Intensity (I)", positive=True),
         Param("I0", "Reference intensity (I0)", positive=True,
               default=constants.I_0))
def intensity_level(I, I0):
    return 10 * math.log10(I / I0)


@formula("pressure-level", "L = 20 * log10(deltaP / deltaP0)",
         Param("deltaP", "Pressure amplitude (deltaP)", positive=True),
         Param("deltaP0", "Reference pressure (deltaP0)", positive=True,
               default=constants.P_0))
def pressure_level(deltaP, deltaP0):
    return 20 * math.log10(deltaP / deltaP0)


@formula("doppler-effect", "f / f0 = (c + vo) / (c - vs)",
         Param("c", "Wave speed (c)", positive=True),
         Param("vo", "Observer velocity (vo)"),
         Param("vs", "Source velocity (vs)"))
def doppler_effect(c, vo, vs):
    if c - vs == 0:
        raise SingularityError(
            "Source velocity (vs) equals the wave speed (c); "
            "the observed frequency is undefined.")
    return (c + vo) / (c - vs)


@formula("mach-angle", "sin(mu) = c / v",
         Param("c", "Wave speed (c)", positive=True),
         Param("v", "Object speed (v)", positive=True))
def mach_angle(c, v):
    if v < c:
        raise NotApplicableError(
            "Object speed (v) must be at least the wave speed (c); "
            "no Mach cone forms below it.")
    return math.asin(c / v)


class WavesService(FormulaService):

    id = "waves"
    name = "Waves and Sound"
    description = "Wave speed, intensity levels, Doppler and Mach angle"
    formulas = (
        periodic_wave_velocity,
        intensity,
        intensity_level,
        pressure_level,
        doppler_effect,
        mach_angle,
    )
