"""Client for the issue assignees API."""

from . import urls
from .connection import ApiConnection, NotFoundError
from .ensure import argument_not_empty
from .models import GitHubUser


class AssigneesClient:
    """Lists available assignees and checks whether a user can be assigned.

    API Reference: https://docs.github.com/en/rest/issues/assignees
    """

    def __init__(self, connection: ApiConnection):
        self._connection = connection

    async def get_for_repository(self, owner: str, name: str) -> list[GitHubUser]:
        """Get all users issues in the repository can be assigned to."""
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")

        return await self._connection.get_all(urls.assignees(owner, name), GitHubUser)

    async def check_assignee(self, owner: str, name: str, assignee: str) -> bool:
        """Check whether a user can be assigned issues in the repository.

        Args:
            owner: Owner of the repository
            name: Name of the repository
            assignee: Login of the user to check

        Returns:
            True if the user is an assignable collaborator, False otherwise
        """
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")
        argument_not_empty(assignee, "assignee")

        try:
            await self._connection.get(urls.check_assignee(owner, name, assignee))
        except NotFoundError:
            return False
        return True
