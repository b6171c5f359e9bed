"""Data model for parsed constraint-grammar streams.

WHY: A CG stream is a flat sequence of text lines, but every consumer
(serializer, JSON view, downstream rule engines) needs the same nested
shape: tokens with their candidate analyses. Two small dataclasses give
that shape a single, well-typed definition.

HOW: Two dataclasses form a hierarchy:
  Cohort  : one surface token plus its own tags and its readings
  Reading : one candidate analysis (lemma plus tags) of a cohort

RULES:
- word_form is stored without its "<" ">" delimiters
- tags keep insertion order and may contain duplicates or empty strings
- A Cohort exclusively owns its readings; there are no back-references
- All text fields are plain owned str values, never views into the input,
  so callers may drop the source text as soon as parsing returns
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Reading:
    """One candidate morphological analysis of a cohort's token.

    RULES:
    - base_form: the lemma, stored without its surrounding quotes
    - tags: opaque annotation tokens (part of speech, weights, links, ...)
    """

    base_form: str
    tags: list[str] = field(default_factory=list)


@dataclass
class Cohort:
    """One input token with its grammar-level tags and readings.

    WHY: The cohort is the unit every CG tool works on. A token may carry
    tags of its own (on the header line) as well as any number of
    readings (on the indented lines that follow it).

    RULES:
    - word_form: literal surface token, unwrapped from "<...>"
    - tags: tags written after the header's closing delimiter
    - readings: in encounter order; empty is valid (e.g. a final "<.>")
    """

    word_form: str
    tags: list[str] = field(default_factory=list)
    readings: list[Reading] = field(default_factory=list)
