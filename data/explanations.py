"""
Formula descriptor store.

Read-only, human-readable metadata for every formula, one JSON file per
language under data/explanations/<language_code>.json. Each file is a
list of records:

    {
        "equation_id": "centripetal-acceleration",
        "name": "Centripetal Acceleration",
        "equation_text": "a_c = v^2 / r",
        "variables": {"v": "...", "r": "..."},
        "description": "...",
        "subject": "Physics",
        "topic": "Circular Motion"
    }

Files are loaded once at startup and never mutated. Lookups are exact
matches on record properties.
"""

import json
import logging
import os

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("equation_id", "name", "equation_text", "variables",
                   "description", "subject", "topic")

# Bulky fields dropped from summary listings
SUMMARY_STRIP = ("description", "variables", "topic", "language_code")


def default_dir():
    """Path to the bundled data/explanations folder."""
    return os.path.join(os.path.dirname(__file__), "explanations")


def proper_case(text):
    """Upper-case the first letter of each space-separated word, lower the rest."""
    return " ".join(w[:1].upper() + w[1:].lower() for w in text.split(" "))


def _valid_record(rec):
    return isinstance(rec, dict) and all(
        rec.get(k) is not None for k in REQUIRED_FIELDS)


def _strip(rec):
    return {k: v for k, v in rec.items() if k not in SUMMARY_STRIP}


class ExplanationStore:
    """
    In-memory descriptor records keyed by language code.

    Parameters
    ----------
    directory : str, optional
        Folder holding <language_code>.json files. Defaults to the
        bundled data/explanations folder.
    """

    def __init__(self, directory=None):
        self.directory = directory or default_dir()
        self._records = {}
        self.load()

    def load(self):
        """(Re)load every descriptor file. Unreadable files are skipped."""
        records = {}
        if not os.path.isdir(self.directory):
            log.warning("Explanations folder not found: %s", self.directory)
            self._records = records
            return
        for fname in sorted(os.listdir(self.directory)):
            if not fname.endswith(".json"):
                continue
            language_code = fname[:-len(".json")]
            path = os.path.join(self.directory, fname)
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                log.warning("Skipping descriptor file %s: %s", path, e)
                continue
            if not isinstance(data, list):
                log.warning("Skipping descriptor file %s: not a list", path)
                continue
            valid = []
            for rec in data:
                if not _valid_record(rec):
                    log.warning("Skipping invalid record in %s: %r",
                                path, rec.get("equation_id")
                                if isinstance(rec, dict) else rec)
                    continue
                rec = dict(rec)
                rec.setdefault("language_code", language_code)
                valid.append(rec)
            records[language_code] = valid
        self._records = records

    def languages(self):
        """Sorted list of supported language codes."""
        return sorted(self._records)

    def find_all(self, language_code):
        """All records for a language, or None if unsupported."""
        records = self._records.get(language_code)
        if records is None:
            return None
        return [dict(r) for r in records]

    def find_one(self, language_code, **criteria):
        """
        First record whose properties equal every criterion.

        Returns
        -------
        dict or None
            None if the language is unsupported or nothing matches.
        """
        for rec in self._records.get(language_code, ()):
            if all(rec.get(k) == v for k, v in criteria.items()):
                return dict(rec)
        return None

    def summaries(self, language_code):
        """Records with the bulky fields stripped, or None if unsupported."""
        records = self._records.get(language_code)
        if records is None:
            return None
        return [_strip(r) for r in records]

    def search(self, language_code, subject, term):
        """
        Summaries whose name contains term (case-insensitive), limited to
        one subject. Returns None if the language is unsupported.
        """
        records = self._records.get(language_code)
        if records is None:
            return None
        subject = proper_case(subject)
        term = term.lower()
        return [_strip(r) for r in records
                if r["subject"] == subject and term in r["name"].lower()]
