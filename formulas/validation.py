"""
Numeric validation for formula parameters.

Every formula parameter passes through validate_number() before any
arithmetic runs. Rules are checked in a fixed order and the first
violation is raised; nothing is accumulated.

Order: finiteness, non-zero, positive, non-negative, integer.

Errors are ValueError subclasses, the same contract service validate()
methods use for bad config, and each carries a machine-readable code
that the request adapter forwards to the client.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
import numbers

MAX_DIGITS = 16


class FormulaError(ValueError):
    """Base class for every caller-visible evaluation failure."""

    code = "invalid_input"

    def __init__(self, message, code=None):
        super().__init__(message)
        if code is not None:
            self.code = code

    @property
    def message(self):
        return self.args[0] if self.args else ""


class InputTypeError(FormulaError):
    """A required parameter is missing, not numeric, or non-finite."""

    code = "invalid_type"


class DomainViolation(FormulaError):
    """A parameter violates a sign, zero or integrality constraint."""

    code = "domain_violation"


class SingularityError(FormulaError):
    """A denominator or precondition is exactly zero with no defined limit."""

    code = "singularity"


class PhysicalBoundError(FormulaError):
    """An input exceeds a hard physical ceiling such as the speed of light."""

    code = "physical_bound"


class NotApplicableError(FormulaError):
    """The formula does not apply to the given input regime."""

    code = "not_applicable"


def is_real(value):
    """True for int/float values (bool excluded)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_finite(value):
    """
    True for a real value that fits in a finite float.

    JSON integers have arbitrary precision, so an int beyond the float
    range counts as non-finite here.
    """
    if not is_real(value):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def validate_number(value, name, positive=False, non_negative=False,
                    non_zero=False, integer=False):
    """
    Check one named numeric input against a rule set.

    Parameters
    ----------
    value : object
        Raw value taken from the request payload.
    name : str
        Label used in messages, e.g. "Radius (r)".
    positive, non_negative, non_zero, integer : bool
        Rules to apply. Finiteness is always implied.

    Returns
    -------
    float or int
        The value, unchanged.

    Raises
    ------
    InputTypeError
        If value is missing, non-numeric, NaN or infinite.
    DomainViolation
        On the first violated rule.
    """
    if not is_finite(value):
        raise InputTypeError("{} must be a finite number.".format(name))
    if non_zero and value == 0:
        raise DomainViolation("{} cannot be zero.".format(name),
                              code="must_be_non_zero")
    if positive and value <= 0:
        raise DomainViolation("{} must be a positive number.".format(name),
                              code="must_be_positive")
    if non_negative and value < 0:
        raise DomainViolation("{} cannot be negative.".format(name),
                              code="must_be_non_negative")
    if integer and not float(value).is_integer():
        raise DomainViolation("{} must be an integer.".format(name),
                              code="must_be_integer")
    return value


def validate_digits(digits):
    """
    Validate the rounding precision requested by the caller.

    Out-of-range values are rejected rather than clamped.

    Raises
    ------
    DomainViolation
        If digits is not an integer in [0, MAX_DIGITS].
    """
    if not is_finite(digits) or not float(digits).is_integer():
        raise DomainViolation("digits must be an integer between 0 and {}."
                              .format(MAX_DIGITS), code="invalid_digits")
    digits = int(digits)
    if digits < 0 or digits > MAX_DIGITS:
        raise DomainViolation("digits must be an integer between 0 and {}."
                              .format(MAX_DIGITS), code="invalid_digits")
    return digits
