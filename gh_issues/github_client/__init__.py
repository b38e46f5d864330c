"""GitHub client package for the issues API."""

from .assignees import AssigneesClient
from .connection import (
    ApiConnection,
    ApiError,
    ApiValidationError,
    AuthorizationError,
    ForbiddenError,
    NotFoundError,
)
from .issues import IssuesClient
from .milestones import MilestonesClient
from .models import (
    GitHubLabel,
    GitHubUser,
    Issue,
    IssueFilter,
    IssueRequest,
    IssueSort,
    IssueUpdate,
    ItemState,
    ItemStateFilter,
    Milestone,
    MilestoneRequest,
    MilestoneSort,
    MilestoneUpdate,
    NewIssue,
    NewMilestone,
    RepositoryIssueRequest,
    SortDirection,
)

__all__ = [
    "ApiConnection",
    "ApiError",
    "ApiValidationError",
    "AuthorizationError",
    "ForbiddenError",
    "NotFoundError",
    "IssuesClient",
    "AssigneesClient",
    "MilestonesClient",
    "GitHubUser",
    "GitHubLabel",
    "Issue",
    "IssueFilter",
    "IssueRequest",
    "IssueSort",
    "IssueUpdate",
    "ItemState",
    "ItemStateFilter",
    "Milestone",
    "MilestoneRequest",
    "MilestoneSort",
    "MilestoneUpdate",
    "NewIssue",
    "NewMilestone",
    "RepositoryIssueRequest",
    "SortDirection",
]
