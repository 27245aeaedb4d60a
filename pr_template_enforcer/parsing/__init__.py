"""Markdown parsing helpers."""

from .checklist import extract_checklist_items
from .sections import split_sections, strip_front_matter, strip_html_comments

__all__ = [
    "extract_checklist_items",
    "split_sections",
    "strip_front_matter",
    "strip_html_comments",
]
