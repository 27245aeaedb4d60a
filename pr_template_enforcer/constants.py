"""Constants shared across the PR template enforcer."""

import re

TEMPLATE_PATHS = [
    ".github/PULL_REQUEST_TEMPLATE.md",
    ".github/pull_request_template.md",
    "PULL_REQUEST_TEMPLATE.md",
    "pull_request_template.md",
    "docs/PULL_REQUEST_TEMPLATE.md",
    "docs/pull_request_template.md",
    ".github/PULL_REQUEST_TEMPLATE/default.md",
]

DEFAULT_LABEL_NAME = "invalid-template"

SIMILARITY_THRESHOLD = 0.95

HTML_COMMENT_REGEX = re.compile(r"<!--[\s\S]*?-->")

TASK_LIST_REGEX = re.compile(r"^[ \t]*-[ \t]*\[([ xX])\][ \t]*(.+)$", re.MULTILINE)

HEADING_MARKER_REGEX = re.compile(r"^#+\s*")

ERROR_MESSAGES = {
    "missing_section": 'Missing required section: "%s"',
    "empty_section": 'Section "%s" appears to be empty.',
    "unmodified_content": 'Section "%s" appears to contain unmodified template content.',
    "missing_task_list": 'Section "%s" is missing its task list from the template.',
    "no_completed_tasks": (
        'Section "%s" has no completed task items. Please complete at least one task.'
    ),
    "invalid_ticket": (
        "PR title does not contain a valid JIRA ticket reference. Expected pattern: %s"
    ),
}

SUCCESS_COMMENT = (
    "### :white_check_mark: PR Template Validation Passed\n\n"
    "This pull request complies with the template requirements."
)
FAILURE_COMMENT_HEADER = "### :x: PR Template Validation Failed\n\n"

CHECK_RUN_NAME = "PR Template Validation"
CHECK_TITLES = {"success": "PR Template Valid", "failure": "PR Template Invalid"}
CHECK_SUCCESS_SUMMARY = "PR template validation passed"
CHECK_FAILURE_SUMMARY = "PR template validation failed with errors:\n"

VALIDATION_FAILED = "Pull request does not comply with the template."
