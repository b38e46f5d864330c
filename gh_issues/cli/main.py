"""Main CLI entry point."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import GitHubConfig
from ..github_client.connection import ApiError, ApiValidationError
from ..github_client.issues import IssuesClient
from ..github_client.models import (
    Issue,
    IssueFilter,
    IssueRequest,
    IssueSort,
    IssueUpdate,
    ItemState,
    ItemStateFilter,
    MilestoneRequest,
    NewIssue,
    RepositoryIssueRequest,
    SortDirection,
)
from ..utils.date_parser import resolve_since
from .options import (
    API_URL_OPTION,
    ASSIGNEE_OPTION,
    BODY_OPTION,
    DIRECTION_OPTION,
    FILTER_OPTION,
    LABELS_OPTION,
    LAST_DAYS_OPTION,
    LAST_WEEKS_OPTION,
    MILESTONE_OPTION,
    MINE_OPTION,
    ORG_OPTION_OPTIONAL,
    REPO_OPTION,
    SINCE_OPTION,
    SORT_OPTION,
    STATE_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-issues",
    help="GitHub issues, assignees and milestones from the command line",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def main(verbose: bool = VERBOSE_OPTION) -> None:
    """GitHub issues, assignees and milestones from the command line."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True))],
        )


def _client_for(token: str | None, api_url: str | None) -> IssuesClient:
    config = GitHubConfig(token=token, api_url=api_url)
    return IssuesClient(config.create_connection())


def _run(
    command: Callable[..., Coroutine[Any, Any, None]],
    token: str | None,
    api_url: str | None,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Build a client and run a command coroutine with it.

    Configuration, API and argument errors all end in exit code 1.
    """
    try:
        client = _client_for(token, api_url)
        asyncio.run(command(client, *args, **kwargs))
    except ApiValidationError as e:
        console.print(f"❌ [red]{e}[/red]")
        for error in e.errors:
            console.print(f"   [red]- {error}[/red]")
        raise typer.Exit(1)
    except (ApiError, ValueError) as e:
        console.print(f"❌ [red]{e}[/red]")
        raise typer.Exit(1)


def _split_repo(repo: str) -> tuple[str, str]:
    owner, _, name = repo.partition("/")
    if not owner or not name or "/" in name:
        raise ValueError(f"Repository must be given as OWNER/NAME, got '{repo}'")
    return owner, name


def _print_issue(issue: Issue) -> None:
    console.print(f"[bold]#{issue.number} {issue.title}[/bold]")
    console.print(f"State: {issue.state.value}")
    if issue.user:
        console.print(f"Author: {issue.user.login}")
    if issue.assignees:
        console.print(
            f"Assignees: {', '.join(user.login for user in issue.assignees)}"
        )
    elif issue.assignee:
        console.print(f"Assignee: {issue.assignee.login}")
    if issue.milestone:
        console.print(f"Milestone: {issue.milestone.title} (#{issue.milestone.number})")
    if issue.labels:
        console.print(f"Labels: {', '.join(label.name for label in issue.labels)}")
    if issue.html_url:
        console.print(f"URL: {issue.html_url}")
    if issue.body:
        console.print()
        console.print(issue.body)


def _issues_table(issues: list[Issue], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Issue #", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("State", style="green")
    table.add_column("Labels", style="magenta")
    table.add_column("Comments", justify="right", style="yellow")

    for issue in issues:
        table.add_row(
            str(issue.number),
            issue.title[:60] + ("..." if len(issue.title) > 60 else ""),
            issue.state.value,
            ", ".join(label.name for label in issue.labels),
            str(issue.comments),
        )
    return table


@app.command()
def get(
    owner: str = typer.Argument(help="Repository owner"),
    name: str = typer.Argument(help="Repository name"),
    number: int = typer.Argument(help="Issue number"),
    token: str | None = TOKEN_OPTION,
    api_url: str | None = API_URL_OPTION,
) -> None:
    """Show a single issue."""
    _run(_run_get, token, api_url, owner, name, number)


async def _run_get(client: IssuesClient, owner: str, name: str, number: int) -> None:
    async with client.connection:
        issue = await client.get(owner, name, number)
    _print_issue(issue)


@app.command(name="list")
def list_issues(
    org: str | None = ORG_OPTION_OPTIONAL,
    repo: str | None = REPO_OPTION,
    mine: bool = MINE_OPTION,
    issue_filter: IssueFilter = FILTER_OPTION,
    state: ItemStateFilter = STATE_OPTION,
    labels: list[str] | None = LABELS_OPTION,
    sort: IssueSort = SORT_OPTION,
    direction: SortDirection = DIRECTION_OPTION,
    since: str | None = SINCE_OPTION,
    last_days: int | None = LAST_DAYS_OPTION,
    last_weeks: int | None = LAST_WEEKS_OPTION,
    token: str | None = TOKEN_OPTION,
    api_url: str | None = API_URL_OPTION,
) -> None:
    """List issues.

    Listing scopes:
    - Current user (default): issues across all visible repositories
    - --mine: owned and member repositories only
    - --org ORG: one organization
    - --repo OWNER/NAME: one repository

    Examples:
        gh-issues list --repo octocat/hello-world --state all --label bug
        gh-issues list --org myorg --filter all --last-weeks 2
    """
    if sum([org is not None, repo is not None, mine]) > 1:
        console.print("❌ [red]Error: use only one of --org, --repo and --mine[/red]")
        raise typer.Exit(1)

    try:
        since_dt = resolve_since(since, last_days, last_weeks)
    except ValueError as e:
        console.print(f"❌ Date validation error: {e}")
        raise typer.Exit(1)

    common = {
        "state": state,
        "labels": labels or [],
        "sort": sort,
        "direction": direction,
        "since": since_dt,
    }
    if repo is not None:
        try:
            owner, name = _split_repo(repo)
        except ValueError as e:
            console.print(f"❌ [red]Error: {e}[/red]")
            raise typer.Exit(1)
        repo_request = RepositoryIssueRequest(**common)
        _run(_run_list_repository, token, api_url, owner, name, repo_request)
    else:
        request = IssueRequest(filter=issue_filter, **common)
        _run(_run_list, token, api_url, request, org=org, mine=mine)


async def _run_list(
    client: IssuesClient, request: IssueRequest, org: str | None, mine: bool
) -> None:
    async with client.connection:
        if org is not None:
            issues = await client.get_all_for_organization(org, request)
            title = f"Issues in {org}"
        elif mine:
            issues = await client.get_all_for_owned_and_member_repositories(request)
            title = "Issues in owned and member repositories"
        else:
            issues = await client.get_all_for_current(request)
            title = "Issues for current user"
    _show_issues(issues, title)


async def _run_list_repository(
    client: IssuesClient, owner: str, name: str, request: RepositoryIssueRequest
) -> None:
    async with client.connection:
        issues = await client.get_for_repository(owner, name, request)
    _show_issues(issues, f"Issues in {owner}/{name}")


def _show_issues(issues: list[Issue], title: str) -> None:
    if not issues:
        console.print("No issues found matching the criteria")
        return
    console.print(_issues_table(issues, title))
    console.print(f"✅ Found {len(issues)} issues")


@app.command()
def create(
    owner: str = typer.Argument(help="Repository owner"),
    name: str = typer.Argument(help="Repository name"),
    title: str = typer.Option(..., "--title", help="Issue title"),
    body: str | None = BODY_OPTION,
    assignee: str | None = ASSIGNEE_OPTION,
    milestone: int | None = MILESTONE_OPTION,
    labels: list[str] | None = LABELS_OPTION,
    token: str | None = TOKEN_OPTION,
    api_url: str | None = API_URL_OPTION,
) -> None:
    """Create an issue."""
    fields: dict[str, Any] = {"title": title}
    if body is not None:
        fields["body"] = body
    if assignee is not None:
        fields["assignee"] = assignee
    if milestone is not None:
        fields["milestone"] = milestone
    if labels:
        fields["labels"] = labels
    new_issue = NewIssue(**fields)

    _run(_run_create, token, api_url, owner, name, new_issue)


async def _run_create(
    client: IssuesClient, owner: str, name: str, new_issue: NewIssue
) -> None:
    async with client.connection:
        issue = await client.create(owner, name, new_issue)
    console.print(f"✅ Created issue #{issue.number}: {issue.title}")
    if issue.html_url:
        console.print(issue.html_url)


@app.command()
def update(
    owner: str = typer.Argument(help="Repository owner"),
    name: str = typer.Argument(help="Repository name"),
    number: int = typer.Argument(help="Issue number"),
    title: str | None = typer.Option(None, "--title", help="New title"),
    body: str | None = BODY_OPTION,
    state: ItemState | None = typer.Option(None, "--state", "-s", help="New state"),
    assignee: str | None = ASSIGNEE_OPTION,
    clear_assignee: bool = typer.Option(
        False, "--clear-assignee", help="Remove the assignee"
    ),
    milestone: int | None = MILESTONE_OPTION,
    clear_milestone: bool = typer.Option(
        False, "--clear-milestone", help="Remove the milestone"
    ),
    labels: list[str] | None = typer.Option(
        None, "--label", "-l", help="Replace labels (can be used multiple times)"
    ),
    clear_labels: bool = typer.Option(
        False, "--clear-labels", help="Remove all labels"
    ),
    token: str | None = TOKEN_OPTION,
    api_url: str | None = API_URL_OPTION,
) -> None:
    """Update an issue. Only the given fields change."""
    if assignee is not None and clear_assignee:
        console.print(
            "❌ [red]Error: --assignee and --clear-assignee are exclusive[/red]"
        )
        raise typer.Exit(1)
    if milestone is not None and clear_milestone:
        console.print(
            "❌ [red]Error: --milestone and --clear-milestone are exclusive[/red]"
        )
        raise typer.Exit(1)
    if labels and clear_labels:
        console.print("❌ [red]Error: --label and --clear-labels are exclusive[/red]")
        raise typer.Exit(1)

    # Only fields placed here are sent; None clears the field
    changes: dict[str, Any] = {}
    if title is not None:
        changes["title"] = title
    if body is not None:
        changes["body"] = body
    if state is not None:
        changes["state"] = state
    if assignee is not None or clear_assignee:
        changes["assignee"] = assignee
    if milestone is not None or clear_milestone:
        changes["milestone"] = milestone
    if labels:
        changes["labels"] = labels
    elif clear_labels:
        changes["labels"] = []

    if not changes:
        console.print("❌ [red]Error: nothing to update[/red]")
        raise typer.Exit(1)

    _run(_run_update, token, api_url, owner, name, number, IssueUpdate(**changes))


async def _run_update(
    client: IssuesClient,
    owner: str,
    name: str,
    number: int,
    issue_update: IssueUpdate,
) -> None:
    async with client.connection:
        issue = await client.update(owner, name, number, issue_update)
    console.print(f"✅ Updated issue #{issue.number}")
    _print_issue(issue)


@app.command()
def milestones(
    owner: str = typer.Argument(help="Repository owner"),
    name: str = typer.Argument(help="Repository name"),
    state: ItemStateFilter = typer.Option(
        ItemStateFilter.OPEN, "--state", "-s", help="Milestone state"
    ),
    token: str | None = TOKEN_OPTION,
    api_url: str | None = API_URL_OPTION,
) -> None:
    """List milestones of a repository."""
    request = MilestoneRequest(state=state)
    _run(_run_milestones, token, api_url, owner, name, request)


async def _run_milestones(
    client: IssuesClient, owner: str, name: str, request: MilestoneRequest
) -> None:
    async with client.connection:
        items = await client.milestone.get_for_repository(owner, name, request)

    if not items:
        console.print("No milestones found")
        return

    table = Table(title=f"Milestones in {owner}/{name}")
    table.add_column("#", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("State", style="green")
    table.add_column("Open", justify="right", style="yellow")
    table.add_column("Closed", justify="right", style="yellow")
    table.add_column("Due", style="magenta")
    for item in items:
        table.add_row(
            str(item.number),
            item.title,
            item.state.value,
            str(item.open_issues),
            str(item.closed_issues),
            item.due_on.strftime("%Y-%m-%d") if item.due_on else "",
        )
    console.print(table)


@app.command()
def assignees(
    owner: str = typer.Argument(help="Repository owner"),
    name: str = typer.Argument(help="Repository name"),
    check: str | None = typer.Option(
        None, "--check", "-c", help="Only check whether this login can be assigned"
    ),
    token: str | None = TOKEN_OPTION,
    api_url: str | None = API_URL_OPTION,
) -> None:
    """List assignable users of a repository, or check one login."""
    _run(_run_assignees, token, api_url, owner, name, check)


async def _run_assignees(
    client: IssuesClient, owner: str, name: str, check: str | None
) -> None:
    async with client.connection:
        if check is not None:
            if await client.assignee.check_assignee(owner, name, check):
                console.print(f"✅ {check} can be assigned issues in {owner}/{name}")
            else:
                console.print(
                    f"❌ {check} cannot be assigned issues in {owner}/{name}"
                )
            return
        users = await client.assignee.get_for_repository(owner, name)

    for user in users:
        console.print(user.login)
    console.print(f"✅ Found {len(users)} assignable users")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_issues import __version__

    console.print(f"gh-issues v{__version__}")


if __name__ == "__main__":
    app()
