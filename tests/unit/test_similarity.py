"""Tests for template similarity scoring."""

from pr_template_enforcer.similarity import (
    is_essentially_unchanged,
    similarity_ratio,
    tokenize_words,
)


def test_tokenize_words():
    """Words, whitespace and punctuation become separate tokens."""
    assert tokenize_words("Fix it, now!") == ["Fix", " ", "it", ",", " ", "now", "!"]


def test_identical_text_scores_one():
    """Unchanged template text is fully preserved."""
    text = "Provide a brief description of the changes"

    assert similarity_ratio(text, text) == 1.0
    assert is_essentially_unchanged(text, text)


def test_empty_reference_scores_zero():
    """There is nothing to preserve in an empty template."""
    assert similarity_ratio("", "anything") == 0.0
    assert not is_essentially_unchanged("", "")


def test_rewritten_text_scores_low():
    """Test that real content is far below the threshold."""
    ratio = similarity_ratio("Describe your changes here", "Added caching to the loader")

    assert ratio < 0.5
    assert not is_essentially_unchanged("Describe your changes here", "Added caching to the loader")


def test_insertions_do_not_lower_the_score():
    """Appending text to the template keeps it fully preserved."""
    reference = "Describe the change."
    candidate = "Describe the change. Also fixed a typo in the README."

    assert similarity_ratio(reference, candidate) == 1.0


def test_whitespace_changes_are_ignored():
    """Reflowed template text still counts as unchanged."""
    reference = "List the changes\nmade in this PR."
    candidate = "List the  changes made\tin this PR."

    assert similarity_ratio(reference, candidate) == 1.0


def test_partial_edit_scores_between():
    """Replacing a few words gives an intermediate score."""
    reference = "Please describe the changes in this pull request"
    candidate = "Please describe the fixes in this pull request"
    ratio = similarity_ratio(reference, candidate)

    assert 0.5 < ratio < 0.95
    assert not is_essentially_unchanged(reference, candidate)


def test_ratio_is_bounded():
    """Scores stay within [0, 1]."""
    for reference, candidate in [
        ("a", "a a a a"),
        ("short", ""),
        ("x y z", "z y x"),
    ]:
        assert 0.0 <= similarity_ratio(reference, candidate) <= 1.0
