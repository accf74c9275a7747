"""
Result formatting: round a computed value to the caller's precision.

Large magnitudes (>= 1e12) and small fractions whose fixed-point form is
mostly zeros are rounded to significant digits in scientific form so that
e.g. 6.6743e-11 does not collapse to 0.0. Everything else is rounded to
`digits` decimal places.

Non-finite values and booleans pass through unchanged: Infinity at v = c
is a legitimate result, not an error. Flask serialises it as the bare
JSON token Infinity, so strict JSON clients must parse responses with
a non-standard constant hook (Python json accepts it by default; JS
JSON.parse does not).
"""

import math

DEFAULT_DIGITS = 4

LARGE_MAGNITUDE = 1e12


def format_number(value, digits=DEFAULT_DIGITS):
    """
    Round value to `digits` places.

    Parameters
    ----------
    value : float, int or bool
        Raw evaluator output.
    digits : int
        Decimal places (or significant mantissa places in scientific mode).

    Returns
    -------
    float or bool
    """
    if isinstance(value, bool):
        return value
    if not math.isfinite(value):
        return value
    # A scientific result can sit on a fixed-point rounding midpoint; a
    # second pass settles it so formatting is idempotent.
    return _round_once(_round_once(value, digits), digits)


def _round_once(value, digits):
    magnitude = abs(value)
    if magnitude >= LARGE_MAGNITUDE:
        return float("{:.{}e}".format(value, digits))
    if 0 < magnitude < 1:
        fixed = "{:.{}f}".format(magnitude, digits)
        if fixed.count("0") >= (digits + 2) / 2.0:
            return float("{:.{}e}".format(value, digits))
    return round(float(value), digits)
