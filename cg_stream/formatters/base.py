"""Formatter interface for parsed CG streams.

WHY: The CLI offers several renderings of one parse (canonical CG text,
a JSON view) and should not care which one it is running.

HOW: BaseFormatter declares a display ``name`` and ``format()``, which
turns the cohort list into FormatterOutput records. Writing them to disk
or stdout is the caller's job.

RULES:
- ``format()`` returns a list; both current formats produce one item
- ``suffix`` is appended to the input's stem, e.g. ``"-canonical.cg"``
- Formatters read cohorts only; they never mutate them
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cg_stream.core.model import Cohort


@dataclass
class FormatterOutput:
    """Rendered content plus the file suffix and MIME type to store it under."""

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """A named rendering of a cohort list.

    New formats subclass this and get an entry in ``FORMATTERS``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name used in CLI log messages."""

    @abstractmethod
    def format(self, cohorts: list[Cohort]) -> list[FormatterOutput]:
        """Render the cohorts; must not modify them."""
