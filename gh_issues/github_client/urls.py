"""Relative endpoint paths for the issues API.

API Reference: https://docs.github.com/en/rest/issues
"""

from urllib.parse import quote


def _segment(value: str | int) -> str:
    return quote(str(value), safe="")


def issues() -> str:
    """Issues across all repositories visible to the authenticated user."""
    return "/issues"


def issues_for_owned_and_member() -> str:
    """Issues across owned and member repositories of the authenticated user."""
    return "/user/issues"


def organization_issues(organization: str) -> str:
    return f"/orgs/{_segment(organization)}/issues"


def repository_issues(owner: str, name: str) -> str:
    return f"/repos/{_segment(owner)}/{_segment(name)}/issues"


def issue(owner: str, name: str, number: int) -> str:
    return f"{repository_issues(owner, name)}/{_segment(number)}"


def assignees(owner: str, name: str) -> str:
    return f"/repos/{_segment(owner)}/{_segment(name)}/assignees"


def check_assignee(owner: str, name: str, login: str) -> str:
    return f"{assignees(owner, name)}/{_segment(login)}"


def milestones(owner: str, name: str) -> str:
    return f"/repos/{_segment(owner)}/{_segment(name)}/milestones"


def milestone(owner: str, name: str, number: int) -> str:
    return f"{milestones(owner, name)}/{_segment(number)}"
