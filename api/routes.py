"""
Flask API routes for the formula service.

Shared endpoints (mounted under the API prefix, /api/v1 by default):
  GET  /services                      - registered services and their formulas
  GET  /formulas                      - every formula with its parameters
  GET  /constants                     - the physical constants table

Service-owned endpoints are mounted by each service:
  POST /<subject>/<formula-id>        - evaluate one formula
  GET  /info/...                      - formula descriptors (see InfoService)
"""

from flask import Blueprint, jsonify

from formulas import constants


def create_api_blueprint(registry):
    """
    Create the API blueprint with shared and service-owned routes.

    Parameters
    ----------
    registry : FormulaRegistry
        Populated registry; each live service mounts its routes here.

    Returns
    -------
    flask.Blueprint
    """
    api = Blueprint("api", __name__)

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for every registered service."""
        return jsonify(registry.list_all())

    @api.route("/formulas", methods=["GET"])
    def list_formulas():
        """Return every formula with its parameter declarations."""
        return jsonify(registry.formulas())

    @api.route("/constants", methods=["GET"])
    def get_constants():
        """Return the physical constants injected as formula defaults."""
        return jsonify(constants.as_dict())

    for service in registry.live():
        service.register_routes(api)

    return api
