"""cg_stream: parse and serialize constraint-grammar cohort streams.

WHY: Constraint-grammar pipelines pass text between tools in a
line-oriented format: a "<word>" header per token, followed by indented
"lemma" TAG TAG ... lines, one per candidate reading. Anything that wants
to inspect or rewrite such a stream needs the same structure and the
same guarantee that writing it back changes nothing.

HOW: Three-stage core: classify each line, fold the verdicts into
cohorts, render cohorts back to text. Formatters and a small CLI sit on
top of the core and are independently testable.

RULES:
- parse() and serialize() never raise; unknown lines are dropped
- serialize(parse(text)) == text for canonical text
- The Cohort/Reading dataclasses are the stable contract
"""

from cg_stream.core.builder import ParseStats, iter_cohorts, parse, parse_with_stats
from cg_stream.core.classifier import classify_line, split_tags
from cg_stream.core.model import Cohort, Reading
from cg_stream.core.serializer import cohort_to_text, serialize

__version__ = "0.1.0"

__all__ = [
    "Cohort",
    "ParseStats",
    "Reading",
    "classify_line",
    "cohort_to_text",
    "iter_cohorts",
    "parse",
    "parse_with_stats",
    "serialize",
    "split_tags",
]
