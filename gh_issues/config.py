"""Configuration for GitHub API access."""

import os

from .github_client.connection import DEFAULT_API_URL, DEFAULT_TIMEOUT, ApiConnection


class GitHubConfig:
    """Configuration class for the GitHub API connection."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize configuration; explicit values override environment variables.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            api_url: API root URL. If None, reads GITHUB_API_URL.
            timeout: Request timeout in seconds. If None, reads GITHUB_TIMEOUT.
        """
        self.token: str | None = token or os.getenv("GITHUB_TOKEN")
        self.api_url: str = api_url or os.getenv("GITHUB_API_URL", DEFAULT_API_URL)

        if timeout is None:
            raw_timeout = os.getenv("GITHUB_TIMEOUT")
            try:
                timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
            except ValueError:
                raise ValueError(
                    f"GITHUB_TIMEOUT must be a number of seconds, got '{raw_timeout}'"
                )
        self.timeout: float = timeout

    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return bool(self.token)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

    def create_connection(self) -> ApiConnection:
        """Build an ApiConnection from this configuration."""
        return ApiConnection(
            token=self.token, base_url=self.api_url, timeout=self.timeout
        )
