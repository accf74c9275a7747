"""
Formula core: declarative parameters and the evaluator wrapper.

This module provides the building blocks every formula service uses.
A formula is a plain function over named numbers, wrapped in a Formula
object that owns its parameter declarations (Param) and its equation
label. Formula.evaluate() is the single entry point:

    payload -> resolve defaults -> validate every Param -> equation
            -> format result -> EvaluationResult

Validation always completes before the equation runs, so no partial
result is ever produced.

Classes:
    Param            - One named input with its validation rules
    EvaluationResult - Immutable record of one evaluation
    Formula          - Evaluator wrapper with declared parameters

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
from collections import OrderedDict

from formulas.formatting import DEFAULT_DIGITS, format_number
from formulas.validation import (
    FormulaError,
    InputTypeError,
    NotApplicableError,
    SingularityError,
    validate_digits,
    validate_number,
)

DEFAULT_TOLERANCE = 1e-9


class Param:
    """
    One named formula input.

    Parameters
    ----------
    name : str
        Wire name of the parameter in the request payload.
    label : str, optional
        Name used in error messages, e.g. "Radius (r)". Defaults to name.
    positive, non_negative, non_zero, integer : bool
        Validation rules. Finiteness is always implied.
    default : float, optional
        Value used when the payload omits the parameter (constants).
    sequence : bool
        If True the parameter is a non-empty list of numbers, each
        element validated with the same rules.
    kwarg : str, optional
        Keyword the equation receives the value under, for wire names
        that are not valid Python identifiers ("lambda").
    """

    def __init__(self, name, label=None, positive=False, non_negative=False,
                 non_zero=False, integer=False, default=None, sequence=False,
                 kwarg=None):
        self.name = name
        self.kwarg = kwarg or name
        self.label = label or name
        self.positive = positive
        self.non_negative = non_negative
        self.non_zero = non_zero
        self.integer = integer
        self.default = default
        self.sequence = sequence

    def rules(self):
        return {
            "positive": self.positive,
            "non_negative": self.non_negative,
            "non_zero": self.non_zero,
            "integer": self.integer,
        }

    def resolve(self, payload):
        """Pull this parameter out of payload and validate it."""
        value = payload.get(self.name)
        if value is None:
            value = self.default
        if self.sequence:
            if not isinstance(value, (list, tuple)) or not value:
                raise InputTypeError(
                    "{} must be a non-empty list of numbers.".format(self.label))
            return [
                validate_number(item, "{}[{}]".format(self.label, i),
                                **self.rules())
                for i, item in enumerate(value)
            ]
        return validate_number(value, self.label, **self.rules())

    def describe(self):
        info = {
            "name": self.name,
            "label": self.label,
            "rules": [rule for rule, on in self.rules().items() if on],
        }
        if self.default is not None:
            info["default"] = self.default
        if self.sequence:
            info["sequence"] = True
        return info


class EvaluationResult:
    """
    Immutable record of one formula evaluation.

    Parameters
    ----------
    formula_id : str
        Identifier of the evaluated formula.
    value : float or bool
        Formatted result.
    inputs : dict
        Resolved and validated inputs, defaults included.
    digits : int
        Precision applied by the formatter.
    """

    def __init__(self, formula_id, value, inputs, digits):
        self.formula_id = formula_id
        self.value = value
        self.inputs = inputs
        self.digits = digits

    def to_dict(self, echo_inputs=True):
        out = {"result": self.value}
        if echo_inputs:
            out["inputs"] = dict(self.inputs, digits=self.digits)
        return out


class Formula:
    """
    Evaluator wrapper around one closed-form equation.

    The equation callable receives every declared parameter as a keyword
    argument and returns a number (or a bool for identity checks). It may
    raise FormulaError subclasses for cross-parameter conditions that a
    single Param rule cannot express.

    Parameters
    ----------
    id : str
        URL identifier, e.g. "centripetal-acceleration".
    equation : callable
        The computation function.
    equation_label : str
        Human-readable equation string (e.g. "a = v^2 / r").
    params : list of Param
        Declared inputs, validated in order.
    identity : bool
        True when the formula checks an identity and returns a bool. A
        "tolerance" parameter is appended automatically.
    """

    def __init__(self, id, equation, equation_label, params, identity=False):
        self.id = id
        self.equation = equation
        self.equation_label = equation_label
        self.params = list(params)
        self.identity = identity
        if identity:
            self.params.append(Param("tolerance", non_negative=True,
                                     default=DEFAULT_TOLERANCE))

    def __call__(self, **kwargs):
        return self.equation(**kwargs)

    def validate(self, payload):
        """
        Resolve and validate every declared parameter.

        Returns
        -------
        OrderedDict
            Parameter name to validated value, in declaration order.

        Raises
        ------
        FormulaError
            On the first invalid parameter.
        """
        if not isinstance(payload, dict):
            raise InputTypeError("Request body must be a JSON object.")
        values = OrderedDict()
        for param in self.params:
            values[param.name] = param.resolve(payload)
        return values

    def evaluate(self, payload, default_digits=DEFAULT_DIGITS):
        """
        Validate payload, run the equation and format the result.

        Parameters
        ----------
        payload : dict
            Flat mapping of parameter names to raw values. An optional
            "digits" key selects the rounding precision.
        default_digits : int
            Precision used when the payload omits "digits".

        Returns
        -------
        EvaluationResult

        Raises
        ------
        FormulaError
            For any invalid input or undefined result.
        """
        values = self.validate(payload)
        digits = validate_digits(payload.get("digits", default_digits))
        try:
            raw = self.equation(
                **{p.kwarg: values[p.name] for p in self.params})
            if not isinstance(raw, bool):
                raw = float(raw)
        except FormulaError:
            raise
        except ZeroDivisionError:
            raise SingularityError(
                "Division by zero: the result is undefined for these inputs.")
        except OverflowError:
            raise FormulaError("Result is too large to represent.",
                               code="overflow")
        except ValueError:
            raise NotApplicableError(
                "The result is not a real number for these inputs.")
        return EvaluationResult(self.id, format_number(raw, digits),
                                values, digits)

    def describe(self):
        return {
            "id": self.id,
            "equation": self.equation_label,
            "params": [p.describe() for p in self.params],
            "returns": "boolean" if self.identity else "number",
        }


def formula(id, equation_label, *params, **kwargs):
    """
    Decorator turning a plain function into a Formula.

    Example
    -------
    @formula("frequency", "f = 1 / T", Param("T", positive=True))
    def frequency(T):
        return 1.0 / T
    """
    def wrap(func):
        f = Formula(id, func, equation_label, params,
                    identity=kwargs.get("identity", False))
        f.__doc__ = func.__doc__
        f.__name__ = func.__name__
        return f
    return wrap


def identity_holds(values, tolerance):
    """
    True when every value in `values` agrees with the first one.

    Comparison is relative (math.isclose). tolerance = 0 means exact
    floating-point equality.
    """
    first = values[0]
    return all(math.isclose(first, v, rel_tol=tolerance, abs_tol=0.0)
               for v in values[1:])
