"""Shared test fixtures for the cg_stream test suite.

WHY: Most test modules need the same sample streams: a noisy one as it
comes out of a real pipeline (stray text, ":" annotation lines) and its
canonical rendering. Keeping them here guarantees every test agrees on
the expected structure.

HOW: Module-level constants hold the raw texts; fixtures hand out fresh
copies and a freshly built expected cohort list for each test.

RULES:
- CANONICAL_STREAM is exactly serialize(EXPECTED) for the noisy sample
- Fixtures return new objects so tests may mutate them freely
"""

from typing import List

import pytest

from cg_stream.core.model import Cohort, Reading


# ---------------------------------------------------------------------------
# Sample streams
# ---------------------------------------------------------------------------

NOISY_STREAM = (
    "some garbage\n"
    '"<They>" TAG1 TAG2\n'
    '    "they" <*> PRON PERS NOM PL3 SUBJ\n'
    "garbage\n"
    '"<went>"\n'
    '    "go" V PAST VFIN\n'
    '"<to>"\n'
    '    "to" PREP\n'
    '"<the>"\n'
    '    "the" DET CENTRAL ART SG/PL\n'
    ": other garbage\n"
    '"<zoo>"\n'
    '    "zoo" N NOM SG\n'
    "    : almost a thing\n"
    '"<.>"\n'
)

CANONICAL_STREAM = (
    '"<They>" TAG1 TAG2\n'
    '    "they" <*> PRON PERS NOM PL3 SUBJ\n'
    '"<went>"\n'
    '    "go" V PAST VFIN\n'
    '"<to>"\n'
    '    "to" PREP\n'
    '"<the>"\n'
    '    "the" DET CENTRAL ART SG/PL\n'
    '"<zoo>"\n'
    '    "zoo" N NOM SG\n'
    '"<.>"\n'
)


def build_expected_cohorts() -> List[Cohort]:
    return [
        Cohort(
            word_form="They",
            tags=["TAG1", "TAG2"],
            readings=[Reading("they", ["<*>", "PRON", "PERS", "NOM", "PL3", "SUBJ"])],
        ),
        Cohort(word_form="went", readings=[Reading("go", ["V", "PAST", "VFIN"])]),
        Cohort(word_form="to", readings=[Reading("to", ["PREP"])]),
        Cohort(word_form="the", readings=[Reading("the", ["DET", "CENTRAL", "ART", "SG/PL"])]),
        Cohort(word_form="zoo", readings=[Reading("zoo", ["N", "NOM", "SG"])]),
        Cohort(word_form="."),
    ]


@pytest.fixture
def noisy_stream():
    """Stream with stray text and ':' annotation lines between cohorts."""
    return NOISY_STREAM


@pytest.fixture
def canonical_stream():
    """Canonical rendering of the noisy stream."""
    return CANONICAL_STREAM


@pytest.fixture
def expected_cohorts():
    """Cohorts both sample streams parse to."""
    return build_expected_cohorts()
