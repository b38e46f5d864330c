"""Client for the issues API."""

from . import urls
from .assignees import AssigneesClient
from .connection import ApiConnection
from .ensure import argument_not_empty, argument_not_none
from .milestones import MilestonesClient
from .models import Issue, IssueRequest, IssueUpdate, NewIssue, RepositoryIssueRequest


class IssuesClient:
    """Issue operations, with assignee and milestone clients attached.

    Every method validates its arguments before a request is made, then
    hands the path and payload to the shared ``ApiConnection``.

    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    def __init__(self, connection: ApiConnection):
        """Initialize the issues client.

        Args:
            connection: Connection shared with the assignee and milestone
                clients
        """
        self._connection = connection
        self._assignee = AssigneesClient(connection)
        self._milestone = MilestonesClient(connection)

    @property
    def connection(self) -> ApiConnection:
        return self._connection

    @property
    def assignee(self) -> AssigneesClient:
        return self._assignee

    @property
    def milestone(self) -> MilestonesClient:
        return self._milestone

    async def get(self, owner: str, name: str, number: int) -> Issue:
        """Get a single issue by number.

        Args:
            owner: Owner of the repository
            name: Name of the repository
            number: Issue number

        Returns:
            The Issue
        """
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")

        return await self._connection.get(urls.issue(owner, name, number), Issue)

    async def get_all_for_current(
        self, request: IssueRequest | None = None
    ) -> list[Issue]:
        """Get issues across all repositories visible to the authenticated user.

        This covers owned, member and organization repositories. Without a
        request, returns open issues assigned to the user, newest first.

        Args:
            request: Filter and sort options

        Returns:
            List of Issue objects across all pages
        """
        if request is None:
            request = IssueRequest()

        return await self._connection.get_all(
            urls.issues(), Issue, request.to_parameters()
        )

    async def get_all_for_owned_and_member_repositories(
        self, request: IssueRequest | None = None
    ) -> list[Issue]:
        """Get issues across owned and member repositories of the authenticated user.

        Args:
            request: Filter and sort options; open issues assigned to the user,
                newest first, when omitted

        Returns:
            List of Issue objects across all pages
        """
        if request is None:
            request = IssueRequest()

        return await self._connection.get_all(
            urls.issues_for_owned_and_member(), Issue, request.to_parameters()
        )

    async def get_all_for_organization(
        self, organization: str, request: IssueRequest | None = None
    ) -> list[Issue]:
        """Get issues of the authenticated user in one organization.

        Args:
            organization: Organization login
            request: Filter and sort options

        Returns:
            List of Issue objects across all pages
        """
        argument_not_empty(organization, "organization")
        if request is None:
            request = IssueRequest()

        return await self._connection.get_all(
            urls.organization_issues(organization), Issue, request.to_parameters()
        )

    async def get_for_repository(
        self, owner: str, name: str, request: RepositoryIssueRequest | None = None
    ) -> list[Issue]:
        """Get issues for a repository.

        Args:
            owner: Owner of the repository
            name: Name of the repository
            request: Filter and sort options; open issues, newest first, when
                omitted

        Returns:
            List of Issue objects across all pages
        """
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")
        if request is None:
            request = RepositoryIssueRequest()

        return await self._connection.get_all(
            urls.repository_issues(owner, name), Issue, request.to_parameters()
        )

    async def create(self, owner: str, name: str, new_issue: NewIssue) -> Issue:
        """Create an issue. Any user with pull access to the repository can do this.

        Args:
            owner: Owner of the repository
            name: Name of the repository
            new_issue: The issue to create

        Returns:
            The created Issue
        """
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")
        argument_not_none(new_issue, "new_issue")

        return await self._connection.post(
            urls.repository_issues(owner, name), new_issue, Issue
        )

    async def update(
        self, owner: str, name: str, number: int, issue_update: IssueUpdate
    ) -> Issue:
        """Update an issue. Only the fields set on ``issue_update`` change.

        Args:
            owner: Owner of the repository
            name: Name of the repository
            number: Issue number
            issue_update: Changes to make to the issue

        Returns:
            The updated Issue
        """
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")
        argument_not_none(issue_update, "issue_update")

        return await self._connection.patch(
            urls.issue(owner, name, number), issue_update, Issue
        )
