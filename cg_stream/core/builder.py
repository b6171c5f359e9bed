"""Structural builder: fold classified lines into cohorts and readings.

WHY: The classifier judges lines one at a time; the structure lives in
their order. A reading belongs to whichever cohort header came last, so
building the tree is a single left-to-right pass that keeps track of the
"current" cohort.

HOW: iter_cohorts() walks any iterable of lines, classifies each one, and
holds the current cohort in a local variable. A cohort is yielded only
when the next header (or the end of input) proves it complete, so the
generator can stream large files without handing out objects that will
still change. parse() and parse_with_stats() collect it into a list.

RULES:
- Cohort header → new Cohort becomes current
- Reading line  → appended to the current Cohort, in encounter order
- Reading line before any header → discarded (logged at DEBUG)
- Unmatched line → ignored
- Never raises for any str input; empty input → []
- Line terminators: "\\n" splits lines, one trailing "\\r" is removed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from cg_stream.core.classifier import CohortHeader, ReadingLine, classify_line
from cg_stream.core.model import Cohort, Reading

logger = logging.getLogger(__name__)


@dataclass
class ParseStats:
    """Counters collected while folding a stream.

    RULES:
    - lines: physical lines seen (a final terminator does not add a line)
    - unmatched_lines: lines with no structural effect, blank lines included
    - orphan_readings: reading lines discarded because no cohort existed yet
    """

    lines: int = 0
    cohorts: int = 0
    readings: int = 0
    unmatched_lines: int = 0
    orphan_readings: int = 0


def _split_lines(text: str) -> List[str]:
    """Split text into lines the way line-oriented tools do.

    "a\\nb\\n" → ["a", "b"]; "" → []. Carriage returns are left for
    _strip_terminator.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_cohorts(
    lines: Iterable[str],
    stats: Optional[ParseStats] = None,
) -> Iterator[Cohort]:
    """Yield completed cohorts from an iterable of stream lines.

    WHY: Annotated corpora can be large. Accepting any iterable (a list,
    an open text file, sys.stdin) lets callers fold a stream without
    holding the whole text in memory.

    Args:
        lines: Stream lines, with or without their trailing terminator.
        stats: Optional ParseStats that is updated in place.

    Yields:
        Each Cohort once no further reading can be attached to it.
    """
    if stats is None:
        stats = ParseStats()

    current: Optional[Cohort] = None

    for lineno, raw_line in enumerate(lines, start=1):
        stats.lines += 1
        verdict = classify_line(_strip_terminator(raw_line))

        if isinstance(verdict, CohortHeader):
            if current is not None:
                yield current
            current = Cohort(word_form=verdict.word_form, tags=verdict.tags)
            stats.cohorts += 1
        elif isinstance(verdict, ReadingLine):
            if current is None:
                logger.debug("Discarding reading before first cohort (line %d)", lineno)
                stats.orphan_readings += 1
                continue
            current.readings.append(Reading(base_form=verdict.base_form, tags=verdict.tags))
            stats.readings += 1
        else:
            stats.unmatched_lines += 1

    if current is not None:
        yield current

    logger.debug(
        "Parsed %d cohorts, %d readings from %d lines (%d unmatched, %d orphan readings)",
        stats.cohorts,
        stats.readings,
        stats.lines,
        stats.unmatched_lines,
        stats.orphan_readings,
    )


def parse_with_stats(text: str) -> Tuple[List[Cohort], ParseStats]:
    """Parse a CG stream and report what the fold saw.

    Returns:
        (cohorts, stats). The cohorts are identical to parse(text).
    """
    stats = ParseStats()
    cohorts = list(iter_cohorts(_split_lines(text), stats))
    return cohorts, stats


def parse(text: str) -> List[Cohort]:
    """Parse a CG stream into an ordered list of cohorts.

    Unrecognised lines are dropped; the function never fails.
    """
    return list(iter_cohorts(_split_lines(text)))
