"""Extraction of task-list items from markdown text."""

from typing import List, Optional

from ..constants import TASK_LIST_REGEX
from ..types import ChecklistItem
from ..utils.monitoring import DiagnosticLogger, default_logger


def _find_items(content: str) -> List[ChecklistItem]:
    return [
        ChecklistItem(text=match.group(2).strip(), checked=match.group(1).lower() == "x")
        for match in TASK_LIST_REGEX.finditer(content)
    ]


def extract_checklist_items(
    content: Optional[str], logger: Optional[DiagnosticLogger] = None
) -> List[ChecklistItem]:
    """Parse task items such as ``- [ ] item`` and ``- [x] item`` from content.

    Args:
        content: Markdown content, usually the body of one section
        logger: Optional diagnostic logger

    Returns:
        List of checklist items in order of appearance. Empty if the content
        is missing or cannot be processed.
    """
    if not content:
        return []

    logger = logger or default_logger
    try:
        return _find_items(content)
    except (TypeError, AttributeError) as e:
        logger.log_warning("extract_checklist_items", {"error": str(e)})
        return []
