"""
Nuclear Physics Service.

Decay activity, exponential decay by half-life, and the radiation
dose quantities (absorbed, equivalent, effective).
"""

from formulas.core import Param, formula
from formulas.services import FormulaService


@formula("activity", "A = N / t",
         Param("nValue", "Number of decays (nValue)", non_negative=True,
               integer=True),
         Param("tValue", "Time (tValue)", positive=True))
def activity(nValue, tValue):
    return nValue / tValue


@formula("half-life", "N = N0 * (1/2)^(t / T_half)",
         Param("N0", "Initial quantity (N0)", non_negative=True),
         Param("tValue", "Elapsed time (tValue)", non_negative=True),
         Param("Thalf", "Half-life (Thalf)", positive=True))
def half_life(N0, tValue, Thalf):
    # 0.5 ** x underflows to 0.0 for large x, never raises
    return N0 * 0.5 ** (tValue / Thalf)


@formula("absorbed-dose", "D = E / m",
         Param("EValue", "Absorbed energy (EValue)", non_negative=True),
         Param("mValue", "Mass (mValue)", positive=True))
def absorbed_dose(EValue, mValue):
    return EValue / mValue


@formula("equivalent-dose", "H = wR * D",
         Param("wR", "Radiation weighting factor (wR)", non_negative=True),
         Param("DValue", "Absorbed dose (DValue)", non_negative=True))
def equivalent_dose(wR, DValue):
    return wR * DValue


@formula("effective-dose", "E = wT * H",
         Param("wT", "Tissue weighting factor (wT)", non_negative=True),
         Param("HValue", "Equivalent dose (HValue)", non_negative=True))
def effective_dose(wT, HValue):
    return wT * HValue


class NuclearService(FormulaService):

    id = "nuclear"
    name = "Nuclear Physics"
    description = "Activity, radioactive decay and radiation dose"
    formulas = (
        activity,
        half_life,
        absorbed_dose,
        equivalent_dose,
        effective_dose,
    )
