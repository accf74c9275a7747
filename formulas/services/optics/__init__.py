"""
Optics Service.

Refraction, thin-lens and mirror relations, double-slit fringes and
Cerenkov radiation. Angles are in radians.

Three formulas are identity checks returning a boolean:

    snells-law      n1 * sin(theta1) == n2 * sin(theta2)
    image-location  1/f == 1/do + 1/di
    image-size      hi/ho == di/do

Distances and heights use the "Value" suffix on the wire (doValue,
diValue, hiValue, hoValue) because "do" is a reserved word in most
client languages.
"""

import math

from formulas import constants
from formulas.core import Param, formula, identity_holds
from formulas.services import FormulaService
from formulas.validation import NotApplicableError, PhysicalBoundError


def _c():
    return Param("c", "Speed of light (c)", positive=True, default=constants.C)


@formula("cerenkov-angle", "cos(theta) = c / (n * vp)",
         _c(),
         Param("n", "Refractive index (n)", positive=True),
         Param("vp", "Particle speed (vp)", positive=True))
def cerenkov_angle(c, n, vp):
    ratio = c / (n * vp)
    if ratio > 1:
        raise PhysicalBoundError(
            "Particle speed (vp) must exceed the phase velocity of light "
            "in the medium (c/n) to emit Cerenkov radiation.")
    return math.acos(ratio)


@formula("interference-fringes", "x = n * lambda * L / d",
         Param("lambda", "Wavelength (lambda)", positive=True,
               kwarg="wavelength"),
         Param("d", "Slit separation (d)", positive=True),
         Param("L", "Screen distance (L)", non_negative=True),
         Param("n", "Fringe order (n)"))
def interference_fringes(wavelength, d, L, n):
    return (n * wavelength * L) / d


@formula("index-of-refraction", "n = c / v",
         _c(),
         Param("v", "Speed in medium (v)", positive=True))
def index_of_refraction(c, v):
    return c / v


@formula("snells-law", "n1 * sin(theta1) = n2 * sin(theta2)",
         Param("n1", "Refractive index (n1)", non_negative=True),
         Param("theta1"),
         Param("n2", "Refractive index (n2)", non_negative=True),
         Param("theta2"),
         identity=True)
def snells_law(n1, theta1, n2, theta2, tolerance):
    return identity_holds(
        [n1 * math.sin(theta1), n2 * math.sin(theta2)], tolerance)


@formula("critical-angle", "sin(theta_c) = n2 / n1",
         Param("n1", "Refractive index (n1)", positive=True),
         Param("n2", "Refractive index (n2)", non_negative=True))
def critical_angle(n1, n2):
    if n2 > n1:
        raise NotApplicableError(
            "Total internal reflection requires n2 <= n1; "
            "no critical angle exists otherwise.")
    return math.asin(n2 / n1)


@formula("image-location", "1/f = 1/do + 1/di",
         Param("f", "Focal length (f)", non_zero=True),
         Param("doValue", "Object distance (doValue)", non_zero=True),
         Param("diValue", "Image distance (diValue)", non_zero=True),
         identity=True)
def image_location(f, doValue, diValue, tolerance):
    return identity_holds([1 / f, 1 / doValue + 1 / diValue], tolerance)


@formula("image-size", "hi/ho = di/do",
         Param("hiValue", "Image height (hiValue)"),
         Param("hoValue", "Object height (hoValue)", non_zero=True),
         Param("diValue", "Image distance (diValue)"),
         Param("doValue", "Object distance (doValue)", non_zero=True),
         identity=True)
def image_size(hiValue, hoValue, diValue, doValue, tolerance):
    return identity_holds([hiValue / hoValue, diValue / doValue], tolerance)


@formula("spherical-mirror", "f = r / 2",
         Param("r", "Radius of curvature (r)"))
def spherical_mirror(r):
    return r / 2


class OpticsService(FormulaService):

    id = "optics"
    name = "Optics"
    description = "Refraction, lenses, mirrors, interference and Cerenkov light"
    formulas = (
        cerenkov_angle,
        interference_fringes,
        index_of_refraction,
        snells_law,
        critical_angle,
        image_location,
        image_size,
        spherical_mirror,
    )
