"""
Electromagnetism Service.

Electrostatics, capacitors, DC circuits, magnetic forces and fields,
induction and AC reactance. Angles are in radians.

The Coulomb constant k, vacuum permeability mu0 and vacuum permittivity
are taken from the constants table when the request omits them.

Identity checks (boolean result):
    capacitive-pe   (1/2)*Q*V == (1/2)*C*V^2 == Q^2 / (2*C)
    electric-power  V*I == I^2*R == V^2 / R

Series/parallel combinations take a JSON array of component values
("resistances" or "capacitances"); each element must be positive.
"""

import math

import numpy as np

from formulas import constants
from formulas.core import Param, formula, identity_holds
from formulas.services import FormulaService
from formulas.validation import DomainViolation


AREA = "Area (A)"
TIME_INTERVAL = "Time interval (deltaT)"


def _mu0():
    return Param("mu0", "Vacuum permeability (mu0)", positive=True,
                 default=constants.MU_0)


def _epsilon0():
    return Param("epsilon0", "Vacuum permittivity (epsilon0)", positive=True,
                 default=constants.EPSILON_0)


def _distance(name="r", label="Distance"):
    return Param(name, "{} ({})".format(label, name), non_zero=True,
                 non_negative=True)


def _components(name):
    return Param(name, name, positive=True, sequence=True)


def _reciprocal_sum(values):
    return 1.0 / np.sum(np.reciprocal(np.asarray(values, dtype=float)))


# ---------------------------------------------------------------------------
# Electrostatics
# ---------------------------------------------------------------------------

@formula("coulombs-law", "F = k * q1 * q2 / r^2",
         Param("k", "Coulomb constant (k)", positive=True,
               default=constants.K_COULOMB),
         Param("q1"), Param("q2"), _distance())
def coulombs_law(k, q1, q2, r):
    return (k * (q1 * q2)) / (r * r)


@formula("electric-field", "E = FE / q",
         Param("FE"), Param("q", "Charge (q)", non_zero=True))
def electric_field(FE, q):
    return FE / q


@formula("electric-potential", "V = deltaUE / q",
         Param("deltaUE"), Param("q", "Charge (q)", non_zero=True))
def electric_potential(deltaUE, q):
    return deltaUE / q


@formula("field-and-potential", "E = deltaV / d",
         Param("deltaV"), Param("d", "Distance (d)", non_zero=True))
def field_and_potential(deltaV, d):
    return deltaV / d


# ---------------------------------------------------------------------------
# Capacitance
# ---------------------------------------------------------------------------

@formula("capacitance", "C = Q / V",
         Param("Q"), Param("V", "Voltage (V)", non_zero=True))
def capacitance(Q, V):
    return Q / V


@formula("plate-capacitor", "C = kEpsilon * epsilon0 * A / d",
         Param("kEpsilon", "Dielectric constant (kEpsilon)",
               non_negative=True),
         Param("A", AREA, non_negative=True),
         _distance("d", "Plate separation"),
         _epsilon0())
def plate_capacitor(kEpsilon, A, d, epsilon0):
    return (kEpsilon * epsilon0 * A) / d


@formula("cylindrical-capacitor",
         "C = 2*pi*kEpsilon*epsilon0*l / ln(r2 / r1)",
         Param("kEpsilon", "Dielectric constant (kEpsilon)",
               non_negative=True),
         Param("l", "Length (l)", non_negative=True),
         _distance("r2", "Outer radius"),
         _distance("r1", "Inner radius"),
         _epsilon0())
def cylindrical_capacitor(kEpsilon, l, r2, r1, epsilon0):
    if r2 <= r1:
        raise DomainViolation(
            "Outer radius (r2) must be greater than inner radius (r1).",
            code="invalid_geometry")
    return (2 * math.pi * kEpsilon * epsilon0 * l) / math.log(r2 / r1)


@formula("spherical-capacitor",
         "C = 4*pi*kEpsilon*epsilon0 / (1/r1 - 1/r2)",
         Param("kEpsilon", "Dielectric constant (kEpsilon)",
               non_negative=True),
         _distance("r1", "Inner radius"),
         _distance("r2", "Outer radius"),
         _epsilon0())
def spherical_capacitor(kEpsilon, r1, r2, epsilon0):
    if r2 <= r1:
        raise DomainViolation(
            "Outer radius (r2) must be greater than inner radius (r1).",
            code="invalid_geometry")
    return (4 * math.pi * kEpsilon * epsilon0) / (1 / r1 - 1 / r2)


@formula("capacitive-pe", "U = (1/2)QV = (1/2)CV^2 = Q^2 / (2C)",
         Param("Q"), Param("V"),
         Param("C", "Capacitance (C)", non_zero=True),
         identity=True)
def capacitive_pe(Q, V, C, tolerance):
    return identity_holds(
        [0.5 * Q * V, 0.5 * C * V * V, (0.5 * Q * Q) / C], tolerance)


# ---------------------------------------------------------------------------
# Current and circuits
# ---------------------------------------------------------------------------

@formula("electric-current", "I = deltaQ / deltaT",
         Param("deltaQ"), Param("deltaT", TIME_INTERVAL, non_zero=True))
def electric_current(deltaQ, deltaT):
    return deltaQ / deltaT


@formula("charge-density", "rho = Q / V",
         Param("Q"), Param("V", "Volume (V)", non_zero=True))
def charge_density(Q, V):
    return Q / V


@formula("current-density", "J = I / A",
         Param("I"), Param("A", AREA, non_zero=True, non_negative=True))
def current_density(I, A):
    return I / A


@formula("ohms-law", "R = V / I",
         Param("V"), Param("I", "Current (I)", non_zero=True))
def ohms_law(V, I):
    return V / I


@formula("resistivity-conductivity", "sigma = 1 / rho",
         Param("rhoValue", "Resistivity (rhoValue)", non_zero=True))
def resistivity_conductivity(rhoValue):
    return 1 / rhoValue


@formula("electric-resistance", "R = rho * l / A",
         Param("rhoValue", "Resistivity (rhoValue)", non_negative=True),
         Param("l", "Length (l)", non_negative=True),
         Param("A", AREA, non_zero=True, non_negative=True))
def electric_resistance(rhoValue, l, A):
    return (rhoValue * l) / A


@formula("electric-power", "P = VI = I^2 R = V^2 / R",
         Param("V"), Param("I"),
         Param("R", "Resistance (R)", non_zero=True),
         identity=True)
def electric_power(V, I, R, tolerance):
    return identity_holds([V * I, I * I * R, (V * V) / R], tolerance)


@formula("resistors-in-series", "R = sum(R_i)", _components("resistances"))
def resistors_in_series(resistances):
    return np.sum(resistances)


@formula("resistors-in-parallel", "1/R = sum(1/R_i)",
         _components("resistances"))
def resistors_in_parallel(resistances):
    return _reciprocal_sum(resistances)


@formula("capacitors-in-series", "1/C = sum(1/C_i)",
         _components("capacitances"))
def capacitors_in_series(capacitances):
    return _reciprocal_sum(capacitances)


@formula("capacitors-in-parallel", "C = sum(C_i)",
         _components("capacitances"))
def capacitors_in_parallel(capacitances):
    return np.sum(capacitances)


# ---------------------------------------------------------------------------
# Magnetism
# ---------------------------------------------------------------------------

@formula("magnetic-force-charge", "F = q * v * B * sin(theta)",
         Param("q"), Param("v"), Param("B"), Param("theta"))
def magnetic_force_charge(q, v, B, theta):
    return q * v * B * math.sin(theta)


@formula("magnetic-force-current", "F = I * l * B * sin(theta)",
         Param("I"), Param("l", "Length (l)", non_negative=True),
         Param("B"), Param("theta"))
def magnetic_force_current(I, l, B, theta):
    return I * l * B * math.sin(theta)


@formula("biot-savart-law", "dB = mu0 * I * ds / (4*pi*r^2)",
         _mu0(), Param("I"), Param("ds"), _distance())
def biot_savart_law(mu0, I, ds, r):
    return (mu0 * I * ds) / (4 * math.pi * r * r)


@formula("solenoid", "B = mu0 * n * I",
         _mu0(), Param("n", "Turns per length (n)", non_negative=True),
         Param("I"))
def solenoid(mu0, n, I):
    return mu0 * n * I


@formula("straight-wire", "B = mu0 * I / (2*pi*r)",
         _mu0(), Param("I"), _distance())
def straight_wire(mu0, I, r):
    return (mu0 * I) / (2 * math.pi * r)


@formula("parallel-wires", "F/l = mu0 * I1 * I2 / (2*pi*d)",
         _mu0(),
         Param("I1", "Current (I1)", non_zero=True),
         Param("I2", "Current (I2)", non_zero=True),
         _distance("d", "Separation"))
def parallel_wires(mu0, I1, I2, d):
    return ((mu0 / (2 * math.pi)) * (I1 * I2)) / d


# ---------------------------------------------------------------------------
# Flux and induction
# ---------------------------------------------------------------------------

@formula("electric-flux", "Phi_E = E * A * cos(theta)",
         Param("E"), Param("A", AREA, non_negative=True), Param("theta"))
def electric_flux(E, A, theta):
    return E * A * math.cos(theta)


@formula("magnetic-flux", "Phi_B = B * A * cos(theta)",
         Param("B"), Param("A", AREA, non_negative=True), Param("theta"))
def magnetic_flux(B, A, theta):
    return B * A * math.cos(theta)


@formula("motional-emf", "emf = B * l * v",
         Param("B"), Param("l", "Length (l)", non_negative=True), Param("v"))
def motional_emf(B, l, v):
    return B * l * v


@formula("induced-emf", "emf = -deltaPhiB / deltaT",
         Param("deltaPhiB"), Param("deltaT", TIME_INTERVAL, non_zero=True))
def induced_emf(deltaPhiB, deltaT):
    return -deltaPhiB / deltaT


@formula("inductance-induced-emf", "emf = -L * dI / dt",
         Param("L", "Inductance (L)", non_negative=True),
         Param("dI"), Param("dt", "Time interval (dt)", non_zero=True))
def inductance_induced_emf(L, dI, dt):
    return (-L * dI) / dt


# ---------------------------------------------------------------------------
# AC circuits
# ---------------------------------------------------------------------------

@formula("capacitive-reactance", "XC = 1 / (2*pi*f*C)",
         Param("f", "Frequency (f)", non_zero=True, positive=True),
         Param("C", "Capacitance (C)", non_zero=True, positive=True))
def capacitive_reactance(f, C):
    return 1 / (2 * math.pi * f * C)


@formula("inductive-reactance", "XL = 2*pi*f*L",
         Param("f", "Frequency (f)", non_negative=True),
         Param("L", "Inductance (L)", non_negative=True))
def inductive_reactance(f, L):
    return 2 * math.pi * f * L


@formula("impedance", "Z = sqrt(R^2 + (XL - XC)^2)",
         Param("R", "Resistance (R)", non_negative=True),
         Param("XL", "Inductive reactance (XL)", non_negative=True),
         Param("XC", "Capacitive reactance (XC)", non_negative=True))
def impedance(R, XL, XC):
    return math.hypot(R, XL - XC)


class ElectromagnetismService(FormulaService):

    id = "electromagnetism"
    name = "Electromagnetism"
    description = "Electrostatics, circuits, magnetism and induction"
    formulas = (
        coulombs_law,
        electric_field,
        electric_potential,
        field_and_potential,
        capacitance,
        plate_capacitor,
        cylindrical_capacitor,
        spherical_capacitor,
        capacitive_pe,
        electric_current,
        charge_density,
        current_density,
        ohms_law,
        resistivity_conductivity,
        electric_resistance,
        electric_power,
        resistors_in_series,
        resistors_in_parallel,
        capacitors_in_series,
        capacitors_in_parallel,
        magnetic_force_charge,
        magnetic_force_current,
        biot_savart_law,
        solenoid,
        straight_wire,
        parallel_wires,
        electric_flux,
        magnetic_flux,
        motional_emf,
        induced_emf,
        inductance_induced_emf,
        capacitive_reactance,
        inductive_reactance,
        impedance,
    )
