"""
Quantum and Atomic Physics Service.

Photon energy and momentum, the photoelectric effect and hydrogen-like
transitions (Rydberg formula).

rydberg-transition returns constant * Z^2 * (1/ni^2 - 1/nf^2). With the
default constant (Rydberg energy in eV) this is E_final - E_initial:
positive for absorption (nf > ni), negative for emission. Pass the
Rydberg constant in 1/m as "constant" to get a wavenumber instead.
"""

from formulas import constants
from formulas.core import Param, formula
from formulas.services import FormulaService
from formulas.validation import DomainViolation


def _h():
    return Param("h", "Planck constant (h)", positive=True,
                 default=constants.H)


@formula("photon-energy-from-frequency", "E = h * f",
         Param("f", "Frequency (f)", non_negative=True), _h())
def photon_energy_from_frequency(f, h):
    return h * f


@formula("photon-momentum-from-wavelength", "p = h / lambda",
         Param("lambda", "Wavelength (lambda)", positive=True,
               kwarg="wavelength"),
         _h())
def photon_momentum_from_wavelength(wavelength, h):
    return h / wavelength


@formula("photoelectric-effect-ke", "K_max = max(0, E - phi)",
         Param("photonEnergy", "Photon energy (photonEnergy)",
               non_negative=True),
         Param("phi", "Work function (phi)", non_negative=True))
def photoelectric_effect_ke(photonEnergy, phi):
    # below threshold no electrons are emitted
    return max(0.0, photonEnergy - phi)


@formula("rydberg-transition", "deltaE = R * Z^2 * (1/ni^2 - 1/nf^2)",
         Param("nInitial", "nInitial", positive=True, integer=True),
         Param("nFinal", "nFinal", positive=True, integer=True),
         Param("atomicNumber", "atomicNumber (Z)", positive=True,
               integer=True, default=1),
         Param("constant", "constant (Rydberg value)", positive=True,
               default=constants.RYDBERG_ENERGY_EV))
def rydberg_transition(nInitial, nFinal, atomicNumber, constant):
    if nInitial == nFinal:
        raise DomainViolation(
            "nInitial and nFinal must be different for a transition.",
            code="degenerate_transition")
    initial_term = 1.0 / (nInitial * nInitial)
    final_term = 1.0 / (nFinal * nFinal)
    return constant * (atomicNumber * atomicNumber) * (initial_term - final_term)


class QuantumService(FormulaService):

    id = "quantum"
    name = "Quantum and Atomic Physics"
    description = "Photons, the photoelectric effect and Rydberg transitions"
    formulas = (
        photon_energy_from_frequency,
        photon_momentum_from_wavelength,
        photoelectric_effect_ke,
        rydberg_transition,
    )
