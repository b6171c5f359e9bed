"""Serializer: render cohorts back into CG stream text.

WHY: Tools further down a CG pipeline read the same line-oriented text the
parser accepts. Rendering must be exact so that canonical input survives a
parse/serialize round trip byte for byte.

HOW: Each cohort becomes a header line followed by one indented line per
reading. Tags are appended one by one, each preceded by a single space.

RULES:
- Header:  "<word_form>" + " tag" per tag + "\\n"
- Reading: four spaces + "base_form" + " tag" per tag + "\\n"
- Cohorts are concatenated with no separator; [] → ""
- No escaping, no validation; never raises for well-typed input
"""

from __future__ import annotations

from typing import Iterable, List

from cg_stream.core.model import Cohort

READING_INDENT = "    "
LINE_TERMINATOR = "\n"


def _render_tags(tags: Iterable[str]) -> str:
    return "".join(" " + tag for tag in tags)


def cohort_to_text(cohort: Cohort) -> str:
    """Render one cohort and its readings as CG stream lines."""
    parts: List[str] = [
        '"<', cohort.word_form, '>"', _render_tags(cohort.tags), LINE_TERMINATOR,
    ]
    for reading in cohort.readings:
        parts.append(READING_INDENT)
        parts.append('"' + reading.base_form + '"')
        parts.append(_render_tags(reading.tags))
        parts.append(LINE_TERMINATOR)
    return "".join(parts)


def serialize(cohorts: Iterable[Cohort]) -> str:
    """Render a sequence of cohorts as one CG stream text."""
    return "".join(cohort_to_text(cohort) for cohort in cohorts)
