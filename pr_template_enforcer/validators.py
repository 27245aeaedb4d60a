"""Checks on who opened a pull request."""

from typing import Iterable


def should_skip_user(
    username: str, skip_users: Iterable[str], skip_service_accounts: Iterable[str]
) -> bool:
    """Check if a username should be skipped based on skip lists.

    Args:
        username: GitHub username to check
        skip_users: Usernames to skip exactly
        skip_service_accounts: Substrings identifying service accounts

    Returns:
        True if the template check should not run for this user
    """
    if username in set(skip_users):
        return True
    return any(account in username for account in skip_service_accounts)
