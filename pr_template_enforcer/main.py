"""Entry points: GitHub Actions run and a local command-line check."""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from github import GithubException

from .constants import VALIDATION_FAILED
from .exceptions import ConfigurationError
from .github_operations import GitHubReporter
from .template_checker import TemplateChecker
from .template_loader import get_pr_template
from .utils.config import EnforcerConfig
from .utils.monitoring import DiagnosticLogger, configure_logging, default_logger
from .validators import should_skip_user


def load_event_payload(env: Mapping[str, str]) -> Dict[str, Any]:
    """Read the webhook payload GitHub Actions stores at GITHUB_EVENT_PATH.

    Raises:
        ConfigurationError: If the payload is missing or not valid JSON
    """
    event_path = env.get("GITHUB_EVENT_PATH")
    if not event_path:
        raise ConfigurationError("GITHUB_EVENT_PATH is not set")
    try:
        with open(event_path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read event payload: {e}") from e


def run(
    env: Optional[Mapping[str, str]] = None, logger: Optional[DiagnosticLogger] = None
) -> int:
    """Validate the pull request of the current GitHub Actions event.

    Args:
        env: Environment mapping, defaults to os.environ
        logger: Optional diagnostic logger

    Returns:
        Process exit code: 0 when compliant or skipped, 1 otherwise
    """
    env = os.environ if env is None else env
    logger = logger or default_logger

    try:
        config = EnforcerConfig.from_env(env, logger)
        configure_logging(config.log_level)

        event_name = env.get("GITHUB_EVENT_NAME", "")
        if event_name != "pull_request":
            logger.log_operation(
                "run", {"message": "This action only runs on pull request events.", "event": event_name}
            )
            return 0

        pull_request = load_event_payload(env).get("pull_request")
        if not pull_request:
            raise ConfigurationError("Could not find pull request data in the event payload")

        user_login = (pull_request.get("user") or {}).get("login", "")
        if should_skip_user(user_login, config.skip_users, config.skip_service_accounts):
            logger.log_operation("run", {"message": "Skipping template check for user", "user": user_login})
            return 0

        repo_full_name = env.get("GITHUB_REPOSITORY", "")
        if not repo_full_name:
            raise ConfigurationError("GITHUB_REPOSITORY is not set")
        reporter = GitHubReporter.from_token(
            config.github_token, repo_full_name, config.label_name, logger
        )

        template = None
        if config.enforce_template:
            logger.log_operation("run", {"message": "Fetching repository PR template..."})
            template = get_pr_template(
                reporter.repo, env.get("GITHUB_WORKSPACE") or None, logger
            )
            if template is None:
                logger.log_warning(
                    "run",
                    {"message": "No PR template found in repository. Will check for required sections only."},
                )

        checker = TemplateChecker(
            required_sections=config.required_sections,
            jira_pattern=config.jira_pattern,
            template=template,
            require_task_lists_completion=config.require_task_completion,
            logger=logger,
        )
        result = checker.validate_description(
            pull_request.get("body") or "", pull_request.get("title") or ""
        )

        pr_number = pull_request["number"]
        if result.is_valid:
            reporter.handle_success(pr_number)
            return 0

        reporter.handle_failure(pr_number, result)
        logger.log_error("run", f"{VALIDATION_FAILED} {', '.join(result.errors)}")
        return 1

    except (ConfigurationError, GithubException, KeyError) as e:
        logger.log_error("run", f"Action failed: {e}")
        return 1
    except Exception as e:
        logger.log_error("run", f"Action failed: {type(e).__name__}: {e}")
        return 1


def _read_text(path: Optional[str]) -> Optional[str]:
    if path is None:
        return None
    return Path(path).read_text(encoding="utf-8")


def check_files(args: argparse.Namespace, logger: DiagnosticLogger) -> int:
    """Validate local description/template files and print the result."""
    description = _read_text(args.description_file) or ""
    template = _read_text(args.template_file)

    checker = TemplateChecker(
        required_sections=args.required_section or [],
        jira_pattern=args.jira_pattern,
        template=template,
        require_task_lists_completion=args.require_task_completion,
        logger=logger,
    )
    result = checker.validate_description(description, args.title)
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.is_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check pull request descriptions against a PR template"
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    parser.add_argument("--log-file", type=str, help="Optional log file")

    subparsers = parser.add_subparsers(dest="command", help="Command")

    subparsers.add_parser("action", help="Run as a GitHub Action")

    check_parser = subparsers.add_parser("check", help="Validate local files")
    check_parser.add_argument(
        "--description-file", type=str, required=True, help="File holding the PR description"
    )
    check_parser.add_argument("--title", type=str, default="", help="PR title")
    check_parser.add_argument("--template-file", type=str, help="PR template file")
    check_parser.add_argument(
        "--required-section",
        action="append",
        help="Required section name (repeatable)",
    )
    check_parser.add_argument("--jira-pattern", type=str, help="Ticket pattern for the title")
    check_parser.add_argument(
        "--require-task-completion",
        action="store_true",
        help="Require a checked item in template task lists",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for the enforcer."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_file)
    logger = DiagnosticLogger()

    if args.command == "action":
        return run(logger=logger)

    if args.command == "check":
        try:
            return check_files(args, logger)
        except (OSError, ConfigurationError) as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            return 2

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
