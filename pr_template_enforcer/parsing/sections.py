"""Splitting markdown documents into flat, titled sections."""

import re
from typing import List, Optional, Set, Tuple

import frontmatter
import yaml
from markdown_it import MarkdownIt

from ..constants import HTML_COMMENT_REGEX
from ..types import Section
from ..utils.monitoring import DiagnosticLogger, default_logger
from .checklist import extract_checklist_items

_md = MarkdownIt("commonmark")

_ATX_HEADING = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.*)$")
_CLOSING_SEQUENCE = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")


def strip_front_matter(markdown: str, logger: Optional[DiagnosticLogger] = None) -> str:
    """Remove a leading YAML front matter block, if there is a real one.

    A leading ``---`` that does not introduce a mapping (for example a
    horizontal rule) leaves the text untouched.
    """
    if not markdown.lstrip().startswith("---"):
        return markdown

    logger = logger or default_logger
    try:
        post = frontmatter.loads(markdown)
    except (yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
        logger.log_debug("strip_front_matter", {"error": str(e)})
        return markdown

    if not post.metadata:
        return markdown
    return post.content


def strip_html_comments(markdown: str) -> str:
    """Remove all ``<!-- ... -->`` spans, including multi-line ones."""
    return HTML_COMMENT_REGEX.sub("", markdown)


def _closed_fence_lines(text: str, lines: List[str]) -> Set[int]:
    """Line numbers inside fenced code blocks that have a closing fence.

    An unclosed fence runs to the end of the document in CommonMark; its
    lines are left out so headings after it still split sections.
    """
    covered = set()
    for token in _md.parse(text):
        if token.type != "fence" or token.map is None:
            continue
        start, end = token.map
        if end - 1 <= start or end - 1 >= len(lines):
            continue
        closing = lines[end - 1].strip()
        if closing.startswith(token.markup) and not closing.strip(token.markup[0]):
            covered.update(range(start, end))
    return covered


def _find_headings(text: str) -> List[Tuple[int, int, int, str]]:
    """Locate ATX heading lines outside closed code fences.

    Headings inside HTML blocks such as ``<details>`` still count.

    Returns:
        List of ``(start_line, end_line, level, title)`` tuples
    """
    lines = text.split("\n")
    in_fence = _closed_fence_lines(text, lines)
    headings = []
    for number, line in enumerate(lines):
        if number in in_fence:
            continue
        match = _ATX_HEADING.match(line)
        if match is None:
            continue
        title = _CLOSING_SEQUENCE.sub("", match.group(2)).strip()
        # "## " and "## #" carry no heading text
        if not title:
            continue
        headings.append((number, number + 1, len(match.group(1)), title))
    return headings


def split_sections(
    markdown: Optional[str], logger: Optional[DiagnosticLogger] = None
) -> List[Section]:
    """Parse markdown content into an ordered list of sections.

    Each section holds the text strictly between its heading and the next
    heading of any level. Text before the first heading is dropped.

    Args:
        markdown: The markdown content to parse
        logger: Optional diagnostic logger

    Returns:
        List of sections, empty when the input is missing or unusable
    """
    logger = logger or default_logger

    if markdown is None or markdown == "":
        logger.log_debug("split_sections", {"reason": "empty markdown input"})
        return []

    if not isinstance(markdown, str):
        logger.log_warning(
            "split_sections",
            {"reason": "markdown input is not text", "type": type(markdown).__name__},
        )
        return []

    text = markdown.replace("\r\n", "\n").replace("\r", "\n")
    text = strip_front_matter(text, logger)
    text = strip_html_comments(text)

    try:
        headings = _find_headings(text)
    except (ValueError, IndexError) as e:
        logger.log_warning("split_sections", {"error": str(e)})
        return []

    lines = text.split("\n")
    sections = []
    for position, (_, body_start, level, title) in enumerate(headings):
        if position + 1 < len(headings):
            body_end = headings[position + 1][0]
        else:
            body_end = len(lines)
        content = "\n".join(lines[body_start:body_end]).strip()
        items = extract_checklist_items(content, logger)
        sections.append(
            Section(title=title, level=level, content=content, checklist_items=tuple(items))
        )
        logger.log_debug(
            "split_sections",
            {"section": title, "level": level, "chars": len(content), "task_items": len(items)},
        )

    logger.log_debug("split_sections", {"sections": len(sections)})
    return sections
