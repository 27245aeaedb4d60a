"""Common types used across modules."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .constants import ERROR_MESSAGES


@dataclass(frozen=True)
class ChecklistItem:
    """A single `- [ ]` / `- [x]` entry in a section."""

    text: str
    checked: bool


@dataclass(frozen=True)
class Section:
    """A heading and the body text up to the next heading."""

    title: str
    level: int
    content: str
    checklist_items: Tuple[ChecklistItem, ...] = ()

    @property
    def has_checklist(self) -> bool:
        return len(self.checklist_items) > 0


class ErrorKind(str, Enum):
    """Kinds of validation problems found in a PR."""

    MISSING_SECTION = "missing_section"
    EMPTY_SECTION = "empty_section"
    UNMODIFIED_CONTENT = "unmodified_content"
    MISSING_TASK_LIST = "missing_task_list"
    NO_COMPLETED_TASKS = "no_completed_tasks"
    INVALID_TICKET = "invalid_ticket"


@dataclass(frozen=True)
class ValidationError:
    """A validation problem.

    ``subject`` is the section title, the required entry, or the ticket
    pattern, depending on ``kind``. The human readable text is only produced
    by :attr:`message`.
    """

    kind: ErrorKind
    subject: str

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind.value] % self.subject

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a PR description and title."""

    issues: Tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.issues) == 0

    @property
    def errors(self) -> List[str]:
        return [issue.message for issue in self.issues]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{"valid", "errors"}`` shape used by reporters."""
        return {"valid": self.is_valid, "errors": self.errors}
