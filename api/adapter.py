"""
Request adapter: wraps a Formula as a Flask view.

    POST body (flat JSON object) -> Formula.evaluate()
        success -> 200 {"result": ..., "inputs": {...}}
        FormulaError -> 400 {"error": message, "error_code": code}
        anything else -> 500 {"error": "An unexpected error occurred."}

No exception escapes the view unstructured.
"""

import logging

from flask import current_app, jsonify, request

from formulas.validation import FormulaError

log = logging.getLogger(__name__)


def handle_calculation(formula):
    """
    Build a Flask view function for one formula.

    Parameters
    ----------
    formula : Formula
        The evaluator to invoke.

    Returns
    -------
    callable
        View returning a (response, status) pair.
    """

    def view():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({
                "error": "Request body must be a JSON object",
                "error_code": "invalid_body",
            }), 400
        try:
            result = formula.evaluate(
                data, default_digits=current_app.config["DEFAULT_DIGITS"])
        except FormulaError as e:
            log.info("Calculation rejected on %s: %s", formula.id, e)
            return jsonify({"error": str(e), "error_code": e.code}), 400
        except Exception:
            log.exception("Calculation failed on %s", formula.id)
            return jsonify({"error": "An unexpected error occurred."}), 500
        echo = current_app.config["ECHO_INPUTS"]
        return jsonify(result.to_dict(echo_inputs=echo)), 200

    view.__name__ = "calculate_" + formula.id.replace("-", "_")
    view.__doc__ = "Evaluate {}: {}".format(formula.id, formula.equation_label)
    return view
