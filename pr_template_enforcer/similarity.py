"""Word-level continuity scoring between template and PR text."""

import re
from difflib import SequenceMatcher
from typing import List

from .constants import SIMILARITY_THRESHOLD

_TOKEN_REGEX = re.compile(r"\s+|\w+|[^\w\s]")


def tokenize_words(text: str) -> List[str]:
    """Split text into words, whitespace runs and single punctuation marks."""
    return _TOKEN_REGEX.findall(text)


def _comparison_key(token: str) -> str:
    # whitespace differences are not edits
    return " " if token.isspace() else token


def similarity_ratio(reference: str, candidate: str) -> float:
    """Share of the reference text that survives unchanged in the candidate.

    This is a continuity measure, not an edit distance: characters are counted
    from the reference only, so pure insertions in the candidate do not lower
    the score.

    Args:
        reference: Template content
        candidate: PR description content

    Returns:
        Ratio in ``[0, 1]``; ``0.0`` when the reference is empty
    """
    if not reference:
        return 0.0

    reference_tokens = tokenize_words(reference)
    candidate_tokens = tokenize_words(candidate or "")
    matcher = SequenceMatcher(
        None,
        [_comparison_key(t) for t in reference_tokens],
        [_comparison_key(t) for t in candidate_tokens],
        autojunk=False,
    )

    unchanged = 0
    for block in matcher.get_matching_blocks():
        unchanged += sum(
            len(token) for token in reference_tokens[block.a : block.a + block.size]
        )

    return min(unchanged / len(reference), 1.0)


def is_essentially_unchanged(
    reference: str, candidate: str, threshold: float = SIMILARITY_THRESHOLD
) -> bool:
    """Return True when the candidate is still essentially the reference."""
    return similarity_ratio(reference, candidate) > threshold
