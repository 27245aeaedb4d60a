"""Locating the repository's PR template on disk or through the GitHub API."""

from pathlib import Path
from typing import Optional, Union

from git import InvalidGitRepositoryError, NoSuchPathError, Repo
from github import GithubException, UnknownObjectException
from github.Repository import Repository

from .constants import TEMPLATE_PATHS
from .exceptions import TemplateNotFoundError
from .utils.monitoring import DiagnosticLogger, default_logger
from .utils.retry import RetryConfig, with_retry


def _is_server_error(error: Exception) -> bool:
    return isinstance(error, GithubException) and (error.status or 0) >= 500


API_RETRY = RetryConfig(
    max_attempts=3, delay_seconds=1.0, retry_on=[GithubException], should_retry=_is_server_error
)


def find_repo_root(start: Union[str, Path, None] = None) -> Path:
    """Get the working tree root of the git repository containing ``start``.

    Falls back to ``start`` itself (or the current directory) outside a repository.
    """
    start = Path(start) if start is not None else Path.cwd()
    try:
        repo = Repo(start, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return start
    if repo.working_tree_dir is None:
        return start
    return Path(repo.working_tree_dir)


def find_local_template(
    root: Union[str, Path, None] = None, logger: Optional[DiagnosticLogger] = None
) -> str:
    """
    Read the first PR template found under the repository root.

    Args:
        root: Directory to search, defaults to the git working tree root
        logger: Optional diagnostic logger

    Returns:
        str: The template content

    Raises:
        TemplateNotFoundError: If no template file exists
    """
    logger = logger or default_logger
    root = find_repo_root() if root is None else Path(root)

    for template_path in TEMPLATE_PATHS:
        full_path = root / template_path
        logger.log_debug("find_local_template", {"path": str(full_path)})
        if not full_path.is_file():
            continue
        try:
            content = full_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.log_debug("find_local_template", {"path": str(full_path), "error": str(e)})
            continue
        logger.log_operation("found_template", {"source": "filesystem", "path": str(full_path)})
        return content

    raise TemplateNotFoundError(f"No PR template found under {root}")


def fetch_template_via_api(
    repo: Repository, logger: Optional[DiagnosticLogger] = None
) -> str:
    """
    Fetch the first PR template found in a GitHub repository.

    Args:
        repo: PyGithub repository object
        logger: Optional diagnostic logger

    Returns:
        str: The template content

    Raises:
        TemplateNotFoundError: If no template exists at any known path
        GithubException: For API errors other than 404
    """
    logger = logger or default_logger

    for template_path in TEMPLATE_PATHS:
        logger.log_debug("fetch_template_via_api", {"path": template_path})
        try:
            contents = with_retry(
                lambda: repo.get_contents(template_path), API_RETRY, logger
            )
        except UnknownObjectException:
            continue

        # a directory listing comes back as a list
        if isinstance(contents, list):
            continue
        logger.log_operation("found_template", {"source": "api", "path": template_path})
        return contents.decoded_content.decode("utf-8")

    raise TemplateNotFoundError(f"No PR template found in {repo.full_name}")


def get_pr_template(
    repo: Optional[Repository] = None,
    root: Union[str, Path, None] = None,
    logger: Optional[DiagnosticLogger] = None,
) -> Optional[str]:
    """
    Get the PR template, trying the local checkout before the GitHub API.

    Args:
        repo: Optional PyGithub repository used when no local template exists
        root: Optional directory to search locally
        logger: Optional diagnostic logger

    Returns:
        Optional[str]: The template content, or None if none could be found
    """
    logger = logger or default_logger

    try:
        return find_local_template(root, logger)
    except TemplateNotFoundError:
        logger.log_debug("get_pr_template", {"reason": "no local template"})

    if repo is not None:
        try:
            return fetch_template_via_api(repo, logger)
        except TemplateNotFoundError:
            pass
        except GithubException as e:
            logger.log_warning("get_pr_template", {"error": str(e)})
            return None
        except UnicodeDecodeError as e:
            logger.log_warning(
                "get_pr_template", {"reason": "template is not UTF-8 text", "error": str(e)}
            )
            return None

    logger.log_warning(
        "get_pr_template", {"reason": "No PR template found in filesystem or via GitHub API"}
    )
    return None
