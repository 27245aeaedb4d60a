"""Tests for splitting markdown into sections."""

import pytest

from pr_template_enforcer.parsing import split_sections, strip_front_matter
from pr_template_enforcer.types import ChecklistItem, Section


@pytest.mark.parametrize("markdown", [None, ""])
def test_empty_input_yields_no_sections(markdown):
    """Missing or empty markdown is not an error."""
    assert split_sections(markdown) == []


def test_non_string_input_fails_soft(mock_logger):
    """Non-text input is logged and produces no sections."""
    assert split_sections(12345, logger=mock_logger) == []
    mock_logger.log_warning.assert_called_once()


def test_sections_in_document_order():
    """Test headings, levels and contents are captured in order."""
    markdown = """# Title
intro
## Summary
Hello

## Changes
- [x] done
- [ ] todo
"""
    sections = split_sections(markdown)

    assert [s.title for s in sections] == ["Title", "Summary", "Changes"]
    assert [s.level for s in sections] == [1, 2, 2]
    assert sections[0].content == "intro"
    assert sections[1].content == "Hello"
    assert sections[2].content == "- [x] done\n- [ ] todo"
    assert sections[2].checklist_items == (
        ChecklistItem(text="done", checked=True),
        ChecklistItem(text="todo", checked=False),
    )


def test_content_stops_at_heading_of_any_level():
    """Nested headings end the parent section; the model is flat."""
    sections = split_sections("## Parent\nparent text\n#### Child\nchild text")

    assert sections[0] == Section(title="Parent", level=2, content="parent text")
    assert sections[1].title == "Child"
    assert sections[1].level == 4
    assert "Child" not in sections[0].content


def test_text_before_first_heading_is_dropped():
    """Preamble text does not become an untitled section."""
    sections = split_sections("Some preamble\n\n## Summary\nBody")

    assert len(sections) == 1
    assert sections[0].title == "Summary"


def test_html_comments_are_removed():
    """Comments never show up in titles or content."""
    markdown = """## Summary
<!-- Describe
## Not a heading
your change -->
Real text

## Testing <!-- how? -->
<!-- describe tests -->
"""
    sections = split_sections(markdown)

    assert [s.title for s in sections] == ["Summary", "Testing"]
    assert sections[0].content == "Real text"
    assert sections[1].content == ""
    assert all("<!--" not in s.content for s in sections)


def test_heading_requires_space_after_markers():
    """Test that '##Summary' is plain text, not a heading."""
    assert split_sections("##Summary\ntext") == []


def test_seven_markers_is_not_a_heading():
    """Only levels one to six are headings."""
    sections = split_sections("## Real\n####### not a heading")

    assert len(sections) == 1
    assert sections[0].content == "####### not a heading"


def test_closing_markers_are_not_part_of_title():
    """ATX closing sequences are dropped from the title."""
    sections = split_sections("## Summary ##\ntext")

    assert sections[0].title == "Summary"


def test_hash_lines_in_code_blocks_are_content():
    """Headings inside fenced code are not section boundaries."""
    markdown = "## Usage\n```bash\n# install first\npip install .\n```\n## Notes\nn"
    sections = split_sections(markdown)

    assert [s.title for s in sections] == ["Usage", "Notes"]
    assert "# install first" in sections[0].content


def test_setext_underline_is_content():
    """A paragraph followed by a rule stays inside the current section."""
    sections = split_sections("## Summary\nSome text\n---\n")

    assert len(sections) == 1
    assert sections[0].content == "Some text\n---"


def test_front_matter_is_stripped():
    """Issue-template style YAML front matter is not content."""
    markdown = "---\nname: Feature\nabout: Propose a change\n---\n## Summary\nText"
    sections = split_sections(markdown)

    assert len(sections) == 1
    assert sections[0].title == "Summary"
    assert sections[0].content == "Text"


def test_leading_rule_is_not_front_matter():
    """A leading horizontal rule keeps the text intact."""
    markdown = "---\n## Summary\nText"

    assert strip_front_matter(markdown) == markdown
    assert split_sections(markdown)[0].content == "Text"


def test_windows_line_endings():
    """CRLF input splits the same way as LF input."""
    sections = split_sections("## Summary\r\nLine one\r\n## Testing\r\nLine two\r\n")

    assert [s.content for s in sections] == ["Line one", "Line two"]


def test_sections_are_immutable():
    """Test that parsed sections cannot be modified."""
    section = split_sections("## Summary\ntext")[0]

    with pytest.raises(AttributeError):
        section.title = "Other"


def test_headings_after_unclosed_fence_still_split():
    """A fence left open does not swallow the following sections."""
    sections = split_sections("## Usage\n```\ncode\n## Testing\nx")

    assert [s.title for s in sections] == ["Usage", "Testing"]
    assert sections[0].content == "```\ncode"
    assert sections[1].content == "x"


def test_headings_inside_html_block_split():
    """Headings right after a ``<details>`` opener are section boundaries."""
    markdown = "<details>\n## Summary\ntext\n</details>\n\n## Testing\nx"
    sections = split_sections(markdown)

    assert [s.title for s in sections] == ["Summary", "Testing"]
    assert sections[0].content == "text\n</details>"
    assert sections[1].content == "x"


def test_tilde_fence_hides_headings():
    """Closed ``~~~`` fences keep their hash lines as content."""
    sections = split_sections("## Log\n~~~~\n## not a section\n~~~~\n## Next\nn")

    assert [s.title for s in sections] == ["Log", "Next"]
    assert "## not a section" in sections[0].content


@pytest.mark.parametrize("markdown", ["## \ntext", "##\ntext", "## #\ntext"])
def test_headings_without_text_are_ignored(markdown):
    """Heading markers with no heading text do not start sections."""
    assert split_sections(markdown) == []


def test_empty_heading_stays_in_previous_section():
    """An empty heading line is part of the surrounding content."""
    sections = split_sections("## Summary\nfirst\n## \nmore")

    assert len(sections) == 1
    assert sections[0].content == "first\n## \nmore"
