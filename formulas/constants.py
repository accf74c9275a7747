"""
Physical constants for formula evaluation.

Values come from scipy.constants (CODATA 2018 exact / recommended values)
so every evaluator shares one process-wide table. Formulas inject these
as default parameter values; nothing here is ever mutated at runtime.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

import math
from types import MappingProxyType

from scipy import constants as sc

# Newtonian constant of gravitation
G = sc.G  # m^3 kg^-1 s^-2

# Speed of light in vacuum (exact)
C = sc.c  # m/s

# Planck constant (exact)
H = sc.h  # J s

# Boltzmann constant (exact)
K_BOLTZMANN = sc.k  # J/K

# Molar gas constant
R_GAS = sc.R  # J mol^-1 K^-1

# Stefan-Boltzmann constant
SIGMA = sc.Stefan_Boltzmann  # W m^-2 K^-4

# Vacuum permittivity
EPSILON_0 = sc.epsilon_0  # F/m

# Coulomb constant k = 1 / (4 pi epsilon_0)
K_COULOMB = 1.0 / (4.0 * math.pi * EPSILON_0)  # N m^2 C^-2

# Vacuum permeability, classical value 4 pi 1e-7
MU_0 = 4.0 * math.pi * 1e-7  # N/A^2

# Standard acceleration of gravity (exact)
G_EARTH = sc.g  # m/s^2

# Wien wavelength displacement constant
WIEN_B = sc.Wien  # m K

# Wien frequency displacement constant
WIEN_B_PRIME = sc.physical_constants["Wien frequency displacement law constant"][0]  # Hz/K

# Rydberg constant expressed as energy
RYDBERG_ENERGY_EV = sc.physical_constants["Rydberg constant times hc in eV"][0]  # eV

# Rydberg constant
RYDBERG_CONSTANT_M_INV = sc.Rydberg  # 1/m

# Reference intensity and pressure for sound levels
I_0 = 1e-12  # W/m^2
P_0 = 2e-5  # Pa


TABLE = MappingProxyType({
    "G": G,
    "c": C,
    "h": H,
    "k_B": K_BOLTZMANN,
    "R": R_GAS,
    "sigma": SIGMA,
    "epsilon_0": EPSILON_0,
    "k_coulomb": K_COULOMB,
    "mu_0": MU_0,
    "g": G_EARTH,
    "wien_b": WIEN_B,
    "wien_b_prime": WIEN_B_PRIME,
    "rydberg_energy_ev": RYDBERG_ENERGY_EV,
    "rydberg_constant": RYDBERG_CONSTANT_M_INV,
    "I_0": I_0,
    "P_0": P_0,
})


def as_dict():
    """Return a plain copy of the constants table (JSON-serializable)."""
    return dict(TABLE)
