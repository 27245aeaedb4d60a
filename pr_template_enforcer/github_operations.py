"""Module for reporting validation results on GitHub."""

from typing import Optional

from github import Auth, Github, GithubException
from github.Repository import Repository

from .constants import (
    CHECK_FAILURE_SUMMARY,
    CHECK_RUN_NAME,
    CHECK_SUCCESS_SUMMARY,
    CHECK_TITLES,
    FAILURE_COMMENT_HEADER,
    SUCCESS_COMMENT,
)
from .types import ValidationResult
from .utils.monitoring import DiagnosticLogger, default_logger


def format_failure_comment(result: ValidationResult) -> str:
    """Format the PR comment listing validation errors."""
    return FAILURE_COMMENT_HEADER + "\n\n".join(result.errors)


class GitHubReporter:
    """Posts comments, labels and check runs for a pull request.

    Each reporting step is attempted on its own: a failing API call is logged
    and the remaining steps still run.
    """

    def __init__(
        self,
        repo: Repository,
        label_name: str,
        logger: Optional[DiagnosticLogger] = None,
    ):
        """Initialize the reporter.

        Args:
            repo: PyGithub repository the pull request belongs to
            label_name: Label marking PRs that fail validation
            logger: Optional diagnostic logger
        """
        self.repo = repo
        self.label_name = label_name
        self.logger = logger or default_logger

    @classmethod
    def from_token(
        cls,
        token: str,
        repo_full_name: str,
        label_name: str,
        logger: Optional[DiagnosticLogger] = None,
    ) -> "GitHubReporter":
        """
        Create a reporter with an authenticated GitHub client.

        Args:
            token (str): GitHub token
            repo_full_name (str): Full name of the repository (e.g. "owner/repo")
            label_name (str): Label for failing PRs
            logger: Optional diagnostic logger

        Returns:
            GitHubReporter: Reporter bound to the repository
        """
        gh = Github(auth=Auth.Token(token))
        return cls(gh.get_repo(repo_full_name), label_name, logger)

    def _comment(self, pr_number: int, body: str) -> bool:
        try:
            self.repo.get_issue(pr_number).create_comment(body)
            return True
        except GithubException as e:
            self.logger.log_warning(
                "create_comment", {"pr_number": pr_number, "error": str(e)}
            )
            return False

    def add_label(self, pr_number: int) -> bool:
        """Add the failure label to the pull request."""
        try:
            self.repo.get_issue(pr_number).add_to_labels(self.label_name)
            return True
        except GithubException as e:
            self.logger.log_warning(
                "add_label", {"pr_number": pr_number, "label": self.label_name, "error": str(e)}
            )
            return False

    def remove_label(self, pr_number: int) -> bool:
        """Remove the failure label; a label that is not there is not an error."""
        try:
            self.repo.get_issue(pr_number).remove_from_labels(self.label_name)
            return True
        except GithubException as e:
            self.logger.log_debug(
                "remove_label",
                {"pr_number": pr_number, "label": self.label_name, "error": str(e)},
            )
            return False

    def create_check(self, pr_number: int, conclusion: str, summary: str) -> bool:
        """
        Create a completed check run on the pull request head commit.

        Args:
            pr_number (int): Pull request number
            conclusion (str): "success" or "failure"
            summary (str): Summary text for the check

        Returns:
            bool: Whether the check run was created
        """
        try:
            head_sha = self.repo.get_pull(pr_number).head.sha
            self.repo.create_check_run(
                name=CHECK_RUN_NAME,
                head_sha=head_sha,
                status="completed",
                conclusion=conclusion,
                output={"title": CHECK_TITLES[conclusion], "summary": summary},
            )
            return True
        except GithubException as e:
            self.logger.log_warning(
                "create_check", {"pr_number": pr_number, "conclusion": conclusion, "error": str(e)}
            )
            return False

    def handle_success(self, pr_number: int) -> None:
        """Comment, clear the failure label and mark the check as passed."""
        self._comment(pr_number, SUCCESS_COMMENT)
        self.remove_label(pr_number)
        self.create_check(pr_number, "success", CHECK_SUCCESS_SUMMARY)
        self.logger.log_operation(
            "handle_success",
            {"pr_number": pr_number, "message": "Pull request description is compliant with the template."},
        )

    def handle_failure(self, pr_number: int, result: ValidationResult) -> None:
        """Comment with the errors, add the failure label and fail the check."""
        self._comment(pr_number, format_failure_comment(result))
        self.add_label(pr_number)
        self.create_check(
            pr_number, "failure", CHECK_FAILURE_SUMMARY + "\n".join(result.errors)
        )
        self.logger.log_operation(
            "handle_failure", {"pr_number": pr_number, "errors": result.errors}
        )
