"""Client for the milestones API."""

from . import urls
from .connection import ApiConnection
from .ensure import argument_not_empty, argument_not_none
from .models import Milestone, MilestoneRequest, MilestoneUpdate, NewMilestone


class MilestonesClient:
    """Milestone operations for a repository.

    API Reference: https://docs.github.com/en/rest/issues/milestones
    """

    def __init__(self, connection: ApiConnection):
        self._connection = connection

    async def get(self, owner: str, name: str, number: int) -> Milestone:
        """Get a single milestone by number."""
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")

        return await self._connection.get(
            urls.milestone(owner, name, number), Milestone
        )

    async def get_for_repository(
        self, owner: str, name: str, request: MilestoneRequest | None = None
    ) -> list[Milestone]:
        """List milestones for a repository.

        Args:
            owner: Owner of the repository
            name: Name of the repository
            request: Filter and sort options; open milestones ordered by due
                date when omitted

        Returns:
            List of Milestone objects across all pages
        """
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")
        if request is None:
            request = MilestoneRequest()

        return await self._connection.get_all(
            urls.milestones(owner, name), Milestone, request.to_parameters()
        )

    async def create(
        self, owner: str, name: str, new_milestone: NewMilestone
    ) -> Milestone:
        """Create a milestone. Requires push access to the repository."""
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")
        argument_not_none(new_milestone, "new_milestone")

        return await self._connection.post(
            urls.milestones(owner, name), new_milestone, Milestone
        )

    async def update(
        self,
        owner: str,
        name: str,
        number: int,
        milestone_update: MilestoneUpdate,
    ) -> Milestone:
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")
        argument_not_none(milestone_update, "milestone_update")

        return await self._connection.patch(
            urls.milestone(owner, name, number), milestone_update, Milestone
        )

    async def delete(self, owner: str, name: str, number: int) -> None:
        argument_not_empty(owner, "owner")
        argument_not_empty(name, "name")

        await self._connection.delete(urls.milestone(owner, name, number))
