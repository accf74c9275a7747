"""
Fluids Service.

Fluid statics, flow rates, Bernoulli's principle, viscosity, drag, and
the dimensionless flow numbers (Mach, Reynolds, Froude).

bernoulli-equation is an identity check: it returns True when the total
head P + rho*g*y + (1/2)*rho*v^2 agrees at the two points.
"""

import math

from formulas import constants
from formulas.core import Param, formula, identity_holds
from formulas.services import FormulaService


DENSITY = "Density (rho)"
AREA = "Area (A)"


def _g():
    return Param("g", "Gravitational acceleration (g)", non_negative=True,
                 default=constants.G_EARTH)


@formula("density", "rho = m / V",
         Param("m", "Mass (m)", non_negative=True),
         Param("V", "Volume (V)", positive=True))
def density(m, V):
    return m / V


@formula("pressure", "P = F / A",
         Param("F"), Param("A", AREA, positive=True))
def pressure(F, A):
    return F / A


@formula("pressure-in-fluid", "P = P0 + rho*g*h",
         Param("P0"), Param("rho", DENSITY, non_negative=True), _g(),
         Param("h", "Depth (h)"))
def pressure_in_fluid(P0, rho, g, h):
    return P0 + rho * g * h


@formula("buoyancy", "Fb = rho * g * Vdisplaced",
         Param("rho", DENSITY, non_negative=True), _g(),
         Param("Vdisplaced", "Displaced volume (Vdisplaced)",
               non_negative=True))
def buoyancy(rho, g, Vdisplaced):
    return rho * g * Vdisplaced


@formula("mass-flow-rate", "qm = deltaM / deltaT",
         Param("deltaM"),
         Param("deltaT", "Time interval (deltaT)", non_zero=True,
               positive=True))
def mass_flow_rate(deltaM, deltaT):
    return deltaM / deltaT


@formula("volume-flow-rate", "qV = deltaV / deltaT",
         Param("deltaV1"),
         Param("deltaT1", "Time interval (deltaT1)", non_zero=True,
               positive=True))
def volume_flow_rate(deltaV1, deltaT1):
    return deltaV1 / deltaT1


@formula("bernoulli-equation",
         "P1 + rho*g*y1 + (1/2)*rho*v1^2 = P2 + rho*g*y2 + (1/2)*rho*v2^2",
         Param("P1"), Param("rho", DENSITY, non_negative=True), _g(),
         Param("y1"), Param("v1"), Param("P2"), Param("y2"), Param("v2"),
         identity=True)
def bernoulli_equation(P1, rho, g, y1, v1, P2, y2, v2, tolerance):
    head1 = P1 + rho * g * y1 + 0.5 * rho * v1 * v1
    head2 = P2 + rho * g * y2 + 0.5 * rho * v2 * v2
    return identity_holds([head1, head2], tolerance)


@formula("dynamic-viscosity", "eta = (F / A) / (deltaVx / deltaY)",
         Param("F"),
         Param("deltaVx", "Velocity difference (deltaVx)", non_zero=True),
         Param("A", AREA, positive=True),
         Param("deltaY", "Layer separation (deltaY)"))
def dynamic_viscosity(F, deltaVx, A, deltaY):
    return (F * deltaY) / (A * deltaVx)


@formula("kinematic-viscosity", "nu = eta / rho",
         Param("eta", "Dynamic viscosity (eta)", non_negative=True),
         Param("rho", DENSITY, positive=True))
def kinematic_viscosity(eta, rho):
    return eta / rho


@formula("drag", "R = (1/2) * rho * CA * v^2",
         Param("rho", DENSITY, non_negative=True),
         Param("CA", "Drag area (CA)", non_negative=True),
         Param("v"))
def drag(rho, CA, v):
    return 0.5 * rho * CA * v * v


@formula("mach-number", "Ma = v / c",
         Param("v"), Param("c", "Speed of sound (c)", positive=True))
def mach_number(v, c):
    return v / c


@formula("reynolds-number", "Re = rho * v * D / eta",
         Param("rho", DENSITY, non_negative=True), Param("v"),
         Param("D", "Characteristic length (D)", non_negative=True),
         Param("eta", "Dynamic viscosity (eta)", positive=True))
def reynolds_number(rho, v, D, eta):
    return (rho * v * D) / eta


@formula("froude-number", "Fr = v / sqrt(g * l)",
         Param("v"),
         Param("g", "Gravitational acceleration (g)", positive=True,
               default=constants.G_EARTH),
         Param("l", "Characteristic length (l)", positive=True))
def froude_number(v, g, l):
    return v / math.sqrt(g * l)


@formula("surface-tension", "gamma = F / l",
         Param("F"), Param("l", "Length (l)", positive=True))
def surface_tension(F, l):
    return F / l


class FluidsService(FormulaService):

    id = "fluids"
    name = "Fluids"
    description = "Pressure, buoyancy, flow, viscosity and drag"
    formulas = (
        density,
        pressure,
        pressure_in_fluid,
        buoyancy,
        mass_flow_rate,
        volume_flow_rate,
        bernoulli_equation,
        dynamic_viscosity,
        kinematic_viscosity,
        drag,
        mach_number,
        reynolds_number,
        froude_number,
        surface_tension,
    )
