"""Line classification and tag tokenization for CG streams.

WHY: The stream format has no escaping and no explicit record markers.
Whether a line opens a new cohort, adds a reading, or is noise has to be
decided from its shape alone. Keeping that decision in one place means
the builder only folds verdicts and never touches a regex.

HOW: Each line is matched in full against two lazy-capture patterns,
cohort header first, then reading. The first closing delimiter that is
followed by whitespace or end-of-line ends the quoted field, so nested
quoted sub-strings in the trailing tags (e.g. a link to another
"<...>" token) stay in the tags. Everything after the first whitespace
run that follows the delimiter is the raw tag string.

RULES:
- Cohort header:  "<TEXT>" [WS TAGS]    (must start at column 0)
- Reading line:   WS+ "TEXT" [WS TAGS]
- Anything else is Unmatched: blank lines, ":" annotation lines, comments
- Tags split on the literal " " character; runs are never collapsed
- A missing or empty tag string yields [] (never [""])
- classify_line never raises for any str input
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Union

# "<word form>" optionally followed by whitespace and tags.
_COHORT_HEADER_RE = re.compile(r'"<(.*?)>"(?:\s+(.*))?')

# Indented "base form" optionally followed by whitespace and tags.
_READING_RE = re.compile(r'\s+"(.*?)"(?:\s+(.*))?')

TAG_SEPARATOR = " "


def split_tags(raw: Optional[str]) -> List[str]:
    """Tokenize a raw tag string into an ordered list of tags.

    WHY: Tags are joined with single spaces on output, so splitting on the
    same literal character is what makes parse/serialize round-trip.

    RULES:
    - None or "" → []
    - Otherwise raw.split(" "): "V  X" → ["V", "", "X"]
    """
    if not raw:
        return []
    return raw.split(TAG_SEPARATOR)


@dataclass(frozen=True)
class CohortHeader:
    """Verdict for a line that opens a new cohort."""

    word_form: str
    raw_tags: Optional[str] = None

    @property
    def tags(self) -> List[str]:
        return split_tags(self.raw_tags)


@dataclass(frozen=True)
class ReadingLine:
    """Verdict for a line that contributes a reading to the current cohort."""

    base_form: str
    raw_tags: Optional[str] = None

    @property
    def tags(self) -> List[str]:
        return split_tags(self.raw_tags)


@dataclass(frozen=True)
class Unmatched:
    """Verdict for a line with no structural effect."""

    line: str = ""


Verdict = Union[CohortHeader, ReadingLine, Unmatched]


def classify_line(line: str) -> Verdict:
    """Classify one line of a CG stream (without its line terminator).

    Args:
        line: A single physical line without its terminator.

    Returns:
        CohortHeader, ReadingLine, or Unmatched.
    """
    match = _COHORT_HEADER_RE.fullmatch(line)
    if match:
        return CohortHeader(word_form=match.group(1), raw_tags=match.group(2))

    match = _READING_RE.fullmatch(line)
    if match:
        return ReadingLine(base_form=match.group(1), raw_tags=match.group(2))

    return Unmatched(line=line)
