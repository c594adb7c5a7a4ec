"""Field separator detection from a sample of leading lines."""

from __future__ import annotations

from collections.abc import Sequence

from .logging_setup import get_logger

_log = get_logger("statement_ingest.delimiters")

# Priority order matters: ties resolve to the earlier candidate.
CANDIDATE_DELIMITERS: tuple[str, ...] = (";", ",", "\t", "|")

# Number of leading non-empty lines sampled by the pipeline.
SAMPLE_LINES = 10

# Decimal-comma exports put commas in every amount cell, which inflates the
# comma count of semicolon-separated files.
_SEMICOLON_BIAS = 0.1


def _score(delimiter: str, sample_lines: Sequence[str]) -> float:
    avg = sum(line.count(delimiter) for line in sample_lines) / len(sample_lines)
    return avg + (_SEMICOLON_BIAS if delimiter == ";" else 0.0)


def detect_delimiter(sample_lines: Sequence[str]) -> str:
    """Return the most likely separator among :data:`CANDIDATE_DELIMITERS`.

    The score of a candidate is its average raw occurrence count per line
    (quoted occurrences included). An empty sample yields ``";"``.
    """

    if not sample_lines:
        return CANDIDATE_DELIMITERS[0]

    scores = {d: _score(d, sample_lines) for d in CANDIDATE_DELIMITERS}
    # max() keeps the first of equal keys, preserving candidate priority.
    best = max(CANDIDATE_DELIMITERS, key=scores.__getitem__)
    _log.debug("delimiter scores=%s chosen=%r", scores, best)
    return best


__all__ = ["CANDIDATE_DELIMITERS", "SAMPLE_LINES", "detect_delimiter"]
