"""
Physics Formula API
Flask application factory.

Serves the REST API for formula evaluation via registered
FormulaService instances, plus the formula descriptor lookup.

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI

Configuration is read from FORMULA_* environment variables
(e.g. FORMULA_DEFAULT_DIGITS=6) and may be overridden per app by
passing a mapping to create_app().
"""

__version__ = "0.1.0"

import logging

from flask import Flask, jsonify, request

from data.explanations import ExplanationStore
from formulas.formatting import DEFAULT_DIGITS
from formulas.services import FormulaRegistry
from formulas.services.circular_motion import CircularMotionService
from formulas.services.electromagnetism import ElectromagnetismService
from formulas.services.fluids import FluidsService
from formulas.services.gravitation import GravitationService
from formulas.services.heat_transfer import HeatTransferService
from formulas.services.info import InfoService
from formulas.services.mechanics import MechanicsService
from formulas.services.momentum import MomentumService
from formulas.services.nuclear import NuclearService
from formulas.services.optics import OpticsService
from formulas.services.oscillations import OscillationsService
from formulas.services.quantum import QuantumService
from formulas.services.relativity import RelativityService
from formulas.services.rotational_motion import RotationalMotionService
from formulas.services.solid_mechanics import SolidMechanicsService
from formulas.services.thermodynamics import ThermodynamicsService
from formulas.services.waves import WavesService
from formulas.services.work_energy import WorkEnergyService
from formulas.validation import validate_digits

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "DEFAULT_DIGITS": DEFAULT_DIGITS,
    "ECHO_INPUTS": True,
    "EXPLANATIONS_DIR": None,
    "API_PREFIX": "/api/v1",
}


def create_registry(store):
    """Build and populate the service registry."""
    registry = FormulaRegistry()
    registry.register(CircularMotionService())
    registry.register(MechanicsService())
    registry.register(MomentumService())
    registry.register(WorkEnergyService())
    registry.register(RotationalMotionService())
    registry.register(GravitationService())
    registry.register(OscillationsService())
    registry.register(WavesService())
    registry.register(FluidsService())
    registry.register(ThermodynamicsService())
    registry.register(HeatTransferService())
    registry.register(SolidMechanicsService())
    registry.register(OpticsService())
    registry.register(ElectromagnetismService())
    registry.register(RelativityService())
    registry.register(QuantumService())
    registry.register(NuclearService())
    registry.register(InfoService(store))
    return registry


def create_app(test_config=None):
    """
    Application factory for the formula API.

    Parameters
    ----------
    test_config : dict, optional
        Config overrides applied after the environment.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("FORMULA")
    if test_config is not None:
        app.config.from_mapping(test_config)
    app.config["DEFAULT_DIGITS"] = validate_digits(
        app.config["DEFAULT_DIGITS"])

    store = ExplanationStore(app.config["EXPLANATIONS_DIR"])
    registry = create_registry(store)
    app.extensions["formula_registry"] = registry

    # Create and register API blueprint (shared + service-owned routes)
    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry)
    app.register_blueprint(api, url_prefix=app.config["API_PREFIX"])

    log.info("Formula API %s: %d formulas, languages %s",
             __version__, len(registry.formulas()), store.languages())

    @app.route("/")
    def root():
        return "Physics Formula API is running."

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({
            "url": request.path,
            "error": "Can't find what you are looking for.",
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({
            "url": request.path,
            "error": "Method not allowed.",
        }), 405

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({"error": "An unexpected error occurred."}), 500

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)
