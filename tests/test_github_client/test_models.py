"""Tests for GitHub client models."""

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from pydantic import ValidationError

from gh_issues.github_client.models import (
    GitHubLabel,
    GitHubUser,
    Issue,
    IssueRequest,
    IssueSort,
    IssueUpdate,
    ItemState,
    MilestoneRequest,
    NewIssue,
    RepositoryIssueRequest,
    SortDirection,
    format_github_datetime,
)


class TestResponseModels:
    """Test models built from API responses."""

    def test_issue_from_api_payload(self, issue_payload: dict[str, Any]) -> None:
        """Test a full API body validates and unknown fields are ignored."""
        issue = Issue.model_validate(issue_payload)

        assert issue.number == 1347
        assert issue.state == ItemState.OPEN
        assert issue.user is not None and issue.user.login == "octocat"
        assert issue.assignee is not None and issue.assignee.login == "hubot"
        assert [user.login for user in issue.assignees] == ["hubot"]
        assert issue.comments == 3
        assert issue.created_at == datetime(2024, 1, 10, 12, tzinfo=timezone.utc)
        assert not issue.is_pull_request
        assert not hasattr(issue, "node_id")

    def test_pull_request_flag(self, issue_payload: dict[str, Any]) -> None:
        issue_payload["pull_request"] = {"url": "https://api.github.com/pulls/1"}
        assert Issue.model_validate(issue_payload).is_pull_request

    def test_missing_required_fields(self) -> None:
        with pytest.raises(ValidationError):
            Issue.model_validate({"title": "no number", "state": "open"})

        with pytest.raises(ValidationError):
            GitHubUser(login="testuser")  # type: ignore[call-arg]

    def test_label_without_description(self) -> None:
        label = GitHubLabel(name="enhancement", color="00ff00")
        assert label.description is None


class TestIssueRequest:
    """Test query parameter generation."""

    def test_defaults(self) -> None:
        assert IssueRequest().to_parameters() == {
            "filter": "assigned",
            "state": "open",
            "sort": "created",
            "direction": "desc",
        }

    def test_labels_joined(self) -> None:
        params = IssueRequest(labels=["bug", "help wanted"]).to_parameters()
        assert params["labels"] == "bug,help wanted"

    def test_since_formatted_in_utc(self) -> None:
        since = datetime(2024, 1, 1, 12, tzinfo=timezone(timedelta(hours=2)))
        params = IssueRequest(since=since).to_parameters()
        assert params["since"] == "2024-01-01T10:00:00Z"

    def test_string_values_coerced_to_enums(self) -> None:
        request = IssueRequest(sort="updated", direction="asc")  # type: ignore[arg-type]
        assert request.sort == IssueSort.UPDATED
        assert request.direction == SortDirection.ASCENDING

    def test_invalid_state_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IssueRequest(state="pending")  # type: ignore[arg-type]

    def test_repository_request_has_no_filter(self) -> None:
        params = RepositoryIssueRequest(milestone="3", mentioned="octocat").to_parameters()
        assert params == {
            "state": "open",
            "sort": "created",
            "direction": "desc",
            "milestone": "3",
            "mentioned": "octocat",
        }

    def test_milestone_request_defaults(self) -> None:
        assert MilestoneRequest().to_parameters() == {
            "state": "open",
            "sort": "due_date",
            "direction": "asc",
        }


class TestPayloads:
    """Test JSON bodies of create/update payloads."""

    def test_new_issue_requires_title(self) -> None:
        with pytest.raises(ValidationError):
            NewIssue()  # type: ignore[call-arg]

    def test_new_issue_dump_only_set_fields(self) -> None:
        new_issue = NewIssue(title="Bug", milestone=2)
        assert new_issue.model_dump(mode="json", exclude_unset=True) == {
            "title": "Bug",
            "milestone": 2,
        }

    def test_issue_update_keeps_explicit_none(self) -> None:
        update = IssueUpdate(assignee=None, labels=["bug"])
        assert update.model_dump(mode="json", exclude_unset=True) == {
            "assignee": None,
            "labels": ["bug"],
        }


def test_format_github_datetime_naive_is_utc() -> None:
    assert format_github_datetime(datetime(2024, 5, 6, 7, 8, 9)) == "2024-05-06T07:08:09Z"
