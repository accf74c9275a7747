"""
Formula Reference Service.

Serves descriptor records (name, equation text, variables, description)
from the ExplanationStore in the requested language:

  GET /info/equation-summaries/<language_code>
  GET /info/<subject>/<equation_id>/<language_code>
  GET /info/find-equations/<subject>/<search_term>/<language_code>

The literal placeholder "{language_code}" (sent by API explorers when
the field is left blank) falls back to English.
"""

from flask import jsonify

from data.explanations import proper_case
from formulas.services import FormulaService

DEFAULT_LANGUAGE = "en"

UNSUPPORTED_LANGUAGE = "Unknown or unsupported language_code."


def _language(language_code):
    if not language_code or language_code == "{language_code}":
        return DEFAULT_LANGUAGE
    return language_code


class InfoService(FormulaService):

    id = "info"
    name = "Formula Reference"
    description = "Names, equations and descriptions in several languages"
    subjects = ()

    def __init__(self, store):
        self.store = store

    def metadata(self):
        meta = super().metadata()
        meta["languages"] = self.store.languages()
        return meta

    def register_routes(self, bp):
        """Register descriptor lookup endpoints on the given blueprint."""
        store = self.store

        @bp.route("/info/equation-summaries/<language_code>",
                  methods=["GET"])
        def equation_summaries(language_code):
            result = store.summaries(_language(language_code))
            if result is None:
                return jsonify({"error": UNSUPPORTED_LANGUAGE}), 404
            return jsonify({"result": result})

        @bp.route("/info/find-equations/<subject>/<search_term>/<language_code>",
                  methods=["GET"])
        def find_equations(subject, search_term, language_code):
            result = store.search(_language(language_code), subject,
                                  search_term)
            if result is None:
                return jsonify({"error": UNSUPPORTED_LANGUAGE}), 404
            return jsonify({"result": result})

        @bp.route("/info/<subject>/<equation_id>/<language_code>",
                  methods=["GET"])
        def equation_info(subject, equation_id, language_code):
            language_code = _language(language_code)
            if store.find_all(language_code) is None:
                return jsonify({"error": UNSUPPORTED_LANGUAGE}), 404
            info = store.find_one(language_code,
                                  subject=proper_case(subject),
                                  equation_id=equation_id)
            if info is None:
                return jsonify({
                    "error": "Unable to find equation_id of {}.".format(
                        equation_id)
                }), 404
            return jsonify(info)
