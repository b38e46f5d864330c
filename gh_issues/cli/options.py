"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

from ..github_client.models import IssueFilter, IssueSort, ItemStateFilter, SortDirection

# Connection options - used by every command
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

API_URL_OPTION = typer.Option(
    None,
    "--api-url",
    help="GitHub API root URL (defaults to GITHUB_API_URL or https://api.github.com)",
)

# Scope options - select which issue listing to use
ORG_OPTION_OPTIONAL = typer.Option(
    None, "--org", "-o", help="List issues of an organization"
)

REPO_OPTION = typer.Option(
    None, "--repo", "-r", help="List issues of a repository (OWNER/NAME)"
)

MINE_OPTION = typer.Option(
    False, "--mine", help="Only owned and member repositories of the current user"
)

# Filter options
FILTER_OPTION = typer.Option(
    IssueFilter.ASSIGNED,
    "--filter",
    help="Which issues of the current user (ignored with --repo)",
)

STATE_OPTION = typer.Option(ItemStateFilter.OPEN, "--state", "-s", help="Issue state")

LABELS_OPTION = typer.Option(
    None, "--label", "-l", help="Filter by label (can be used multiple times)"
)

SORT_OPTION = typer.Option(IssueSort.CREATED, "--sort", help="Sort property")

DIRECTION_OPTION = typer.Option(
    SortDirection.DESCENDING, "--direction", help="Sort direction"
)

SINCE_OPTION = typer.Option(
    None, "--since", help="Only issues updated since this date (e.g., 2024-01-01)"
)

LAST_DAYS_OPTION = typer.Option(
    None, "--last-days", help="Only issues updated in the last N days"
)

LAST_WEEKS_OPTION = typer.Option(
    None, "--last-weeks", help="Only issues updated in the last N weeks"
)

# Payload options - create/update
BODY_OPTION = typer.Option(None, "--body", "-b", help="Issue body (markdown)")

ASSIGNEE_OPTION = typer.Option(None, "--assignee", "-a", help="Login to assign")

MILESTONE_OPTION = typer.Option(None, "--milestone", "-m", help="Milestone number")

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log HTTP requests to stderr"
)
