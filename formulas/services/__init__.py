"""
Formula Service Layer: FormulaService base class and FormulaRegistry.

Each physics topic (circular motion, optics, relativity, etc.) is a
FormulaService registered with the FormulaRegistry. A service owns a
group of Formula evaluators and mounts one POST endpoint per formula
under every subject it belongs to:

    POST /api/v1/<subject>/<formula-id>

The registry doubles as the static identifier -> evaluator lookup table,
built once at startup; nothing is resolved by reflection per request.

Classes:
    FormulaService  - Base class for a topic of formulas
    FormulaRegistry - Central lookup container for registered services

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from collections import OrderedDict

from formulas.core import Formula


class FormulaService:
    """
    Base class for a formula topic.

    Class Attributes
    ----------------
    id : str
        Unique service identifier (e.g. "optics").
    name : str
        Human-readable display name (e.g. "Optics").
    description : str
        One-liner for the service listing.
    subjects : tuple of str
        URL subjects the formulas are mounted under. "physics" for all
        topics; solid mechanics, thermal and heat transfer are also
        exposed under "engineering".
    status : str
        "live" or "coming_soon".
    formulas : tuple of Formula
        The evaluators this service owns.
    """

    id = ""
    name = ""
    description = ""
    subjects = ("physics",)
    status = "live"
    formulas = ()

    def get(self, formula_id):
        """Return the Formula with this id, or None."""
        for f in self.formulas:
            if f.id == formula_id:
                return f
        return None

    def register_routes(self, blueprint):
        """
        Mount one POST endpoint per formula and subject on a blueprint.

        Parameters
        ----------
        blueprint : flask.Blueprint
            The API blueprint to mount routes on.
        """
        from api.adapter import handle_calculation

        for subject in self.subjects:
            for f in self.formulas:
                blueprint.add_url_rule(
                    "/{}/{}".format(subject, f.id),
                    endpoint="{}_{}".format(
                        subject, f.id.replace("-", "_")),
                    view_func=handle_calculation(f),
                    methods=["POST"],
                )

    def metadata(self):
        """
        Return service metadata for the registry listing.

        Returns
        -------
        dict
            Service info: id, name, description, subjects, status and
            the ids of its formulas.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "subjects": list(self.subjects),
            "status": self.status,
            "formulas": [f.id for f in self.formulas],
        }


class FormulaRegistry:
    """
    Central lookup container for registered FormulaService instances.

    Services register themselves at app startup. Registration also fills
    a (subject, formula_id) -> Formula table used for dispatch and for
    the discovery endpoints. Formula ids are unique per subject.
    """

    def __init__(self):
        self._services = {}
        self._formulas = {}

    def register(self, service):
        """
        Register a service instance.

        Parameters
        ----------
        service : FormulaService
            The service to register. Must have a unique id and must not
            redeclare a formula id already taken within a subject.

        Raises
        ------
        ValueError
            If the service id or one of its formula ids is taken.
        """
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        entries = {}
        for subject in service.subjects:
            for f in service.formulas:
                if not isinstance(f, Formula):
                    raise ValueError(
                        "Service '{}' declares a non-formula entry".format(
                            service.id)
                    )
                key = (subject, f.id)
                if key in self._formulas or key in entries:
                    raise ValueError(
                        "Formula '{}/{}' is already registered".format(
                            subject, f.id)
                    )
                entries[key] = f
        self._services[service.id] = service
        self._formulas.update(entries)

    def get(self, service_id):
        """Look up a service by id, or None."""
        return self._services.get(service_id)

    def lookup(self, subject, formula_id):
        """Look up a formula by subject and id, or None."""
        return self._formulas.get((subject, formula_id))

    def formulas(self):
        """
        Return every registered formula description.

        Returns
        -------
        list of dict
            One entry per formula with the subjects it is served under.
        """
        seen = OrderedDict()
        for (subject, _), f in self._formulas.items():
            entry = seen.get(id(f))
            if entry is None:
                entry = seen[id(f)] = dict(f.describe(), subjects=[])
            entry["subjects"].append(subject)
        return list(seen.values())

    def list_all(self):
        """Return metadata for all registered services, in order."""
        return [s.metadata() for s in self._services.values()]

    def live(self):
        """Return all services with status 'live'."""
        return [s for s in self._services.values()
                if s.status == "live"]
