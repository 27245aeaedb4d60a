"""Comparison of a PR description against the repository's PR template."""

from typing import Dict, Iterable, List, Optional

from .constants import HEADING_MARKER_REGEX
from .parsing import split_sections
from .similarity import is_essentially_unchanged, similarity_ratio
from .types import ErrorKind, Section, ValidationError
from .utils.monitoring import DiagnosticLogger, default_logger


def normalize_section_name(name: str) -> str:
    """Strip leading heading markers and whitespace, then lower-case."""
    return HEADING_MARKER_REGEX.sub("", name.strip()).strip().lower()


def is_required_section(title: str, required_sections: Iterable[str]) -> bool:
    """Check whether a template section is named by any required entry.

    A required entry matches when it equals the section title or is contained
    in it, ignoring case and heading markers. ``"Summary"`` therefore also
    matches ``"Summary of Changes"``.
    """
    cleaned_title = normalize_section_name(title)
    for required in required_sections:
        cleaned_required = normalize_section_name(required)
        if cleaned_title == cleaned_required or cleaned_required in cleaned_title:
            return True
    return False


def validate_without_template(
    description: str,
    required_sections: Iterable[str],
    logger: Optional[DiagnosticLogger] = None,
) -> List[ValidationError]:
    """Check that each required entry literally appears in the description."""
    logger = logger or default_logger
    errors = []
    for section in required_sections:
        if section in description:
            logger.log_operation("found_required_section", {"section": section})
        else:
            logger.log_operation("missing_required_section", {"section": section})
            errors.append(ValidationError(ErrorKind.MISSING_SECTION, section))
    return errors


def _validate_task_list_completion(
    title: str,
    template_section: Section,
    description_section: Section,
    logger: DiagnosticLogger,
) -> Optional[ValidationError]:
    items = description_section.checklist_items
    if not items:
        logger.log_operation(
            "missing_task_list",
            {"section": title, "template_tasks": len(template_section.checklist_items)},
        )
        return ValidationError(ErrorKind.MISSING_TASK_LIST, title)

    completed = sum(1 for item in items if item.checked)
    logger.log_operation(
        "task_completion", {"section": title, "completed": completed, "total": len(items)}
    )
    if completed == 0:
        return ValidationError(ErrorKind.NO_COMPLETED_TASKS, title)
    return None


def _validate_section_content(
    title: str,
    template_section: Section,
    description_section: Section,
    require_checklist_completion: bool,
    logger: DiagnosticLogger,
) -> Optional[ValidationError]:
    if description_section.has_checklist and not require_checklist_completion:
        logger.log_operation("valid_section", {"section": title, "reason": "task list"})
        return None

    content = (description_section.content or "").strip()
    if not content:
        logger.log_operation("empty_section", {"section": title})
        return ValidationError(ErrorKind.EMPTY_SECTION, title)

    template_content = (template_section.content or "").strip()
    if not template_content:
        logger.log_debug("valid_section", {"section": title, "reason": "no template content"})
        return None

    if content == template_content:
        logger.log_operation("unmodified_section", {"section": title, "similarity": 1.0})
        return ValidationError(ErrorKind.UNMODIFIED_CONTENT, title)

    if is_essentially_unchanged(template_content, content):
        logger.log_operation(
            "unmodified_section",
            {"section": title, "similarity": round(similarity_ratio(template_content, content), 4)},
        )
        return ValidationError(ErrorKind.UNMODIFIED_CONTENT, title)

    logger.log_operation("valid_section", {"section": title})
    return None


def compare(
    description: str,
    template: Optional[str],
    required_sections: Iterable[str],
    require_checklist_completion: bool = False,
    logger: Optional[DiagnosticLogger] = None,
) -> List[ValidationError]:
    """Compare a PR description with the template.

    Args:
        description: The PR description
        template: The PR template, or None to check section names only
        required_sections: Section names that must be present and filled in
        require_checklist_completion: Whether template task lists need at
            least one checked item in the description
        logger: Optional diagnostic logger

    Returns:
        Validation errors in template-section order
    """
    logger = logger or default_logger
    required_sections = list(required_sections)
    description = description or ""

    logger.log_operation(
        "compare",
        {
            "required_sections": len(required_sections),
            "require_checklist_completion": require_checklist_completion,
        },
    )

    if not template:
        logger.log_operation("compare", {"mode": "section names only"})
        return validate_without_template(description, required_sections, logger)

    template_sections = split_sections(template, logger)
    description_sections = split_sections(description, logger)
    logger.log_operation(
        "compare",
        {"template_sections": len(template_sections), "description_sections": len(description_sections)},
    )

    by_title: Dict[str, Section] = {
        section.title.lower(): section for section in description_sections
    }

    errors = []
    for template_section in template_sections:
        title = template_section.title
        if not is_required_section(title, required_sections):
            logger.log_debug("skip_optional_section", {"section": title})
            continue

        description_section = by_title.get(title.lower())
        if description_section is None:
            logger.log_operation("missing_required_section", {"section": title})
            errors.append(ValidationError(ErrorKind.MISSING_SECTION, title))
            continue

        if require_checklist_completion and template_section.has_checklist:
            error = _validate_task_list_completion(
                title, template_section, description_section, logger
            )
        else:
            error = _validate_section_content(
                title,
                template_section,
                description_section,
                require_checklist_completion,
                logger,
            )
        if error is not None:
            errors.append(error)

    logger.log_operation("compare", {"errors": len(errors)})
    return errors
