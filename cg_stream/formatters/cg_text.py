"""Canonical CG stream formatter.

WHY: Re-emitting a stream through the serializer normalises it: noise and
annotation lines disappear, readings get the standard four-space indent,
and the result is guaranteed to parse back to the same cohorts.

RULES:
- Content is exactly serialize(cohorts)
- Output suffix: "-canonical.cg"
- Media type: "text/plain"
"""

from __future__ import annotations

from cg_stream.core.model import Cohort
from cg_stream.core.serializer import serialize
from cg_stream.formatters.base import BaseFormatter, FormatterOutput


class CGStreamFormatter(BaseFormatter):
    """Formatter that writes cohorts back out as canonical CG text."""

    @property
    def name(self) -> str:
        return "CG Stream"

    def format(self, cohorts: list[Cohort]) -> list[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-canonical.cg",
                content=serialize(cohorts),
                media_type="text/plain",
            )
        ]
