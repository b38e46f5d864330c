"""Pydantic models for GitHub issue data structures.

Response models map to GitHub's REST API v3 response bodies and ignore
fields they do not declare. Request models produce the query-string
dictionary for list endpoints; payload models are sent as JSON bodies.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ItemState(str, Enum):
    """State of an issue or milestone."""

    OPEN = "open"
    CLOSED = "closed"


class ItemStateFilter(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class IssueFilter(str, Enum):
    """Which issues of the authenticated user to return."""

    ASSIGNED = "assigned"
    CREATED = "created"
    MENTIONED = "mentioned"
    SUBSCRIBED = "subscribed"
    ALL = "all"


class IssueSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    COMMENTS = "comments"


class MilestoneSort(str, Enum):
    DUE_DATE = "due_date"
    COMPLETENESS = "completeness"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def format_github_datetime(value: datetime) -> str:
    """Format a datetime as the ISO 8601 UTC form GitHub expects.

    Naive datetimes are treated as UTC.

    Example:
        >>> format_github_datetime(datetime(2024, 1, 1, 10, 30))
        '2024-01-01T10:30:00Z'
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


class GitHubModel(BaseModel):
    """Base for response models; unknown API fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class GitHubUser(GitHubModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")
    avatar_url: str | None = Field(None, description="Avatar image URL")
    url: str | None = Field(None, description="API URL of the user")
    html_url: str | None = Field(None, description="Profile page URL")


class GitHubLabel(GitHubModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        ..., description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )
    url: str | None = Field(None, description="API URL of the label")


class Milestone(GitHubModel):
    """GitHub milestone model.

    Maps to GitHub REST API Milestone object.
    API Reference: https://docs.github.com/en/rest/issues/milestones
    """

    number: int = Field(..., description="Milestone number within the repository")
    title: str = Field(..., description="Title of the milestone")
    state: ItemState = Field(ItemState.OPEN, description="'open' or 'closed'")
    description: str | None = Field(None, description="Milestone description")
    creator: GitHubUser | None = Field(None, description="User who created it")
    open_issues: int = Field(0, description="Number of open issues")
    closed_issues: int = Field(0, description="Number of closed issues")
    url: str | None = Field(None, description="API URL of the milestone")
    html_url: str | None = Field(None, description="Web URL of the milestone")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")
    closed_at: datetime | None = Field(None, description="Close timestamp")
    due_on: datetime | None = Field(None, description="Due date")


class Issue(GitHubModel):
    """GitHub issue model representing repository issues.

    Maps to GitHub REST API Issue object. Pull requests are returned by the
    list endpoints too; those carry a ``pull_request`` object.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    state: ItemState = Field(..., description="Current state: 'open', 'closed'")
    user: GitHubUser | None = Field(None, description="Creator/author of the issue")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    assignee: GitHubUser | None = Field(None, description="Primary assignee")
    assignees: list[GitHubUser] = Field(
        default_factory=list, description="All assignees of the issue"
    )
    milestone: Milestone | None = Field(None, description="Milestone, if any")
    comments: int = Field(0, description="Number of comments on the issue")
    locked: bool = Field(False, description="Whether the conversation is locked")
    url: str | None = Field(None, description="API URL of the issue")
    html_url: str | None = Field(None, description="Web URL of the issue")
    pull_request: dict[str, Any] | None = Field(
        None, description="Pull request links when the issue is a pull request"
    )
    closed_at: datetime | None = Field(None, description="Close timestamp")
    created_at: datetime | None = Field(
        None, description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime | None = Field(
        None, description="Timestamp of last issue update (ISO 8601)"
    )

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None


class IssueRequest(BaseModel):
    """Filter and sort options for the user/organization issue listings."""

    filter: IssueFilter = Field(
        IssueFilter.ASSIGNED, description="Which issues of the user to return"
    )
    state: ItemStateFilter = Field(ItemStateFilter.OPEN, description="Issue state")
    labels: list[str] = Field(
        default_factory=list, description="Only issues carrying all these labels"
    )
    sort: IssueSort = Field(IssueSort.CREATED, description="Sort property")
    direction: SortDirection = Field(
        SortDirection.DESCENDING, description="Sort direction"
    )
    since: datetime | None = Field(
        None, description="Only issues updated at or after this time"
    )

    def to_parameters(self) -> dict[str, str]:
        """Build the query-string dictionary for this request."""
        parameters: dict[str, str] = {}
        for key, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, list):
                if value:
                    parameters[key] = ",".join(value)
            elif isinstance(value, datetime):
                parameters[key] = format_github_datetime(value)
            elif isinstance(value, Enum):
                parameters[key] = value.value
            else:
                parameters[key] = str(value)
        return parameters


class RepositoryIssueRequest(IssueRequest):
    """Filter and sort options for a single repository's issue listing.

    ``milestone`` and ``assignee`` also accept ``*`` (any) and ``none``.
    """

    # Not accepted by the repository endpoint.
    filter: IssueFilter | None = Field(None, exclude=True)
    milestone: str | None = Field(
        None, description="Milestone number, '*' or 'none'"
    )
    assignee: str | None = Field(None, description="Assignee login, '*' or 'none'")
    creator: str | None = Field(None, description="Login of the issue creator")
    mentioned: str | None = Field(None, description="Login mentioned in the issue")


class MilestoneRequest(BaseModel):
    """Filter and sort options for listing milestones."""

    state: ItemStateFilter = Field(ItemStateFilter.OPEN, description="Milestone state")
    sort: MilestoneSort = Field(MilestoneSort.DUE_DATE, description="Sort property")
    direction: SortDirection = Field(
        SortDirection.ASCENDING, description="Sort direction"
    )

    def to_parameters(self) -> dict[str, str]:
        """Build the query-string dictionary for this request."""
        return {key: value.value for key, value in self.model_dump().items()}


class NewIssue(BaseModel):
    """Body for creating an issue.

    API Reference: https://docs.github.com/en/rest/issues/issues#create-an-issue
    """

    title: str = Field(..., description="Title of the issue")
    body: str | None = Field(None, description="Issue body in markdown")
    assignee: str | None = Field(None, description="Login to assign")
    milestone: int | None = Field(None, description="Milestone number")
    labels: list[str] = Field(default_factory=list, description="Label names")


class IssueUpdate(BaseModel):
    """Body for a partial issue update.

    Only fields that were explicitly set are sent, so setting ``milestone``
    or ``assignee`` to None clears it on the issue.
    """

    title: str | None = Field(None, description="New title")
    body: str | None = Field(None, description="New body")
    assignee: str | None = Field(None, description="Login to assign")
    milestone: int | None = Field(None, description="Milestone number")
    state: ItemState | None = Field(None, description="'open' or 'closed'")
    labels: list[str] | None = Field(None, description="Replacement label names")


class NewMilestone(BaseModel):
    """Body for creating a milestone."""

    title: str = Field(..., description="Title of the milestone")
    state: ItemState | None = Field(None, description="'open' or 'closed'")
    description: str | None = Field(None, description="Milestone description")
    due_on: datetime | None = Field(None, description="Due date")


class MilestoneUpdate(BaseModel):
    """Body for a partial milestone update."""

    title: str | None = Field(None, description="New title")
    state: ItemState | None = Field(None, description="'open' or 'closed'")
    description: str | None = Field(None, description="New description")
    due_on: datetime | None = Field(None, description="New due date")
