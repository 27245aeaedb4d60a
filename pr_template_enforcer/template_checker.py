"""Module for PR template validation."""

import re
from typing import Any, Dict, Iterable, Optional

from .comparator import compare
from .exceptions import InvalidPatternError
from .types import ErrorKind, ValidationError, ValidationResult
from .utils.monitoring import DiagnosticLogger, default_logger


class TemplateChecker:
    """Validates PR descriptions against a template and titles against a ticket pattern."""

    def __init__(
        self,
        required_sections: Iterable[str],
        jira_pattern: Optional[str] = None,
        template: Optional[str] = None,
        require_task_lists_completion: bool = False,
        logger: Optional[DiagnosticLogger] = None,
    ):
        """Initialize the checker.

        Args:
            required_sections: Section names that must be present
            jira_pattern: Optional regular expression the PR title must match
            template: PR template content, or None to check names only
            require_task_lists_completion: Require a checked item in template task lists
            logger: Optional diagnostic logger

        Raises:
            InvalidPatternError: If jira_pattern is not a valid regular expression
        """
        self.required_sections = list(required_sections)
        self.jira_pattern = jira_pattern
        self.template = template
        self.require_task_lists_completion = bool(require_task_lists_completion)
        self.logger = logger or default_logger

        self._title_regex = None
        if jira_pattern and jira_pattern.strip():
            try:
                self._title_regex = re.compile(jira_pattern)
            except re.error as e:
                raise InvalidPatternError(jira_pattern, str(e)) from e

    def validate_title(self, title: str) -> Optional[ValidationError]:
        """Check the PR title against the ticket pattern, if one is configured."""
        if self._title_regex is None:
            return None
        if self._title_regex.search(title or ""):
            return None
        self.logger.log_operation("invalid_title", {"title": title, "pattern": self.jira_pattern})
        return ValidationError(ErrorKind.INVALID_TICKET, self.jira_pattern)

    def validate_description(self, description: str, title: str) -> ValidationResult:
        """Validate a PR description and title.

        Args:
            description: The PR description
            title: The PR title

        Returns:
            ValidationResult with errors in reporting order
        """
        issues = compare(
            description,
            self.template or None,
            self.required_sections,
            self.require_task_lists_completion,
            self.logger,
        )

        title_error = self.validate_title(title)
        if title_error is not None:
            issues.append(title_error)

        return ValidationResult(issues=tuple(issues))


def validate_pr_description(description: str, title: str = "", **options: Any) -> Dict[str, Any]:
    """
    Validate that a PR description matches the required template format.

    Args:
        description (str): The PR description to validate
        title (str): The PR title
        **options: Keyword arguments accepted by TemplateChecker

    Returns:
        Dict[str, Any]: A dictionary containing:
            - valid (bool): Whether the description is valid
            - errors (list): List of validation errors if invalid
    """
    options.setdefault("required_sections", [])
    checker = TemplateChecker(**options)
    return checker.validate_description(description, title).to_dict()
