"""JSON view of a parsed CG stream.

WHY: Tooling outside the CG world (web viewers, notebooks, corpus
statistics scripts) wants the parsed structure, not the line format.
A JSON document with the same field names as the data model is the
simplest thing they can all read.

HOW: Each Cohort and Reading is turned into a plain dict, the whole list
is wrapped in {"cohorts": [...]}, and the result is validated with
jsonschema against cohort_stream_schema.json (bundled next to this
module) before it is dumped.

RULES:
- Field names match the dataclasses: word_form, tags, readings, base_form
- Order of cohorts, readings and tags is preserved
- Non-ASCII text is written as-is (ensure_ascii=False), indent 2
- Output suffix: "-cohorts.json"
- Schema validation is mandatory; raises on invalid output
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from cg_stream.core.model import Cohort, Reading
from cg_stream.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "cohort_stream_schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    """Load the JSON schema, cached at module level after first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _reading_to_dict(reading: Reading) -> dict[str, Any]:
    return {
        "base_form": reading.base_form,
        "tags": list(reading.tags),
    }


def cohort_to_dict(cohort: Cohort) -> dict[str, Any]:
    """Convert one Cohort (and its readings) to a JSON-ready dict."""
    return {
        "word_form": cohort.word_form,
        "tags": list(cohort.tags),
        "readings": [_reading_to_dict(r) for r in cohort.readings],
    }


class JSONFormatter(BaseFormatter):
    """Formatter that produces the JSON view of the parsed cohorts."""

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, cohorts: list[Cohort]) -> list[FormatterOutput]:
        """Convert cohorts into a schema-validated JSON document.

        Raises:
            jsonschema.ValidationError: If the generated document does not
                conform to cohort_stream_schema.json.
        """
        output: dict[str, Any] = {
            "cohorts": [cohort_to_dict(c) for c in cohorts],
        }

        jsonschema.validate(instance=output, schema=get_schema())

        content = json.dumps(output, indent=2, ensure_ascii=False) + "\n"

        return [
            FormatterOutput(
                suffix="-cohorts.json",
                content=content,
                media_type="application/json",
            )
        ]
