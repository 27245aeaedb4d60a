"""Validate pull request descriptions against a repository's PR template."""

from .comparator import compare
from .parsing import extract_checklist_items, split_sections
from .similarity import similarity_ratio
from .template_checker import TemplateChecker, validate_pr_description
from .types import ChecklistItem, ErrorKind, Section, ValidationError, ValidationResult

__all__ = [
    "compare",
    "extract_checklist_items",
    "split_sections",
    "similarity_ratio",
    "TemplateChecker",
    "validate_pr_description",
    "ChecklistItem",
    "ErrorKind",
    "Section",
    "ValidationError",
    "ValidationResult",
]
