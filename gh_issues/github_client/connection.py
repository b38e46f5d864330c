"""Async HTTP connection to the GitHub REST API using httpx."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
API_VERSION = "2022-11-28"
USER_AGENT = "gh-issues/0.1.0"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiError(Exception):
    """Raised when the GitHub API answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        documentation_url: str | None = None,
    ) -> None:
        super().__init__(f"GitHub API error {status_code}: {message}")
        self.message = message
        self.status_code = status_code
        self.documentation_url = documentation_url


class AuthorizationError(ApiError):
    """401: missing or bad credentials."""


class ForbiddenError(ApiError):
    """403: authenticated but not allowed."""


class NotFoundError(ApiError):
    """404: resource does not exist or is not visible."""


class ApiValidationError(ApiError):
    """422: the request body was rejected."""

    def __init__(
        self,
        message: str,
        status_code: int,
        documentation_url: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, status_code, documentation_url)
        self.errors = errors or []


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    401: AuthorizationError,
    403: ForbiddenError,
    404: NotFoundError,
}


class ApiConnection:
    """Generic typed connection shared by the resource clients.

    Owns header setup, JSON (de)serialization, pagination and mapping of
    error statuses onto ``ApiError`` subclasses. Resource clients only build
    paths and hand over payload objects.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the connection.

        Args:
            token: GitHub personal access token sent as a Bearer header.
                Anonymous requests are made when None.
            base_url: API root, e.g. a GitHub Enterprise ``/api/v3`` URL
            timeout: Request timeout in seconds
            http_client: Pre-built client to use instead of creating one.
                The caller keeps ownership and must close it. Its own
                base_url and timeout apply; base_url and timeout given here
                are ignored. GitHub headers are sent per request, so the
                client itself is not modified.
        """
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._headers = headers
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=base_url.rstrip("/"), timeout=timeout
            )
        self._http = http_client

    async def __aenter__(self) -> "ApiConnection":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this connection created it."""
        if self._owns_client and not self._http.is_closed:
            await self._http.aclose()

    async def get(
        self,
        url: str,
        model: type[ModelT] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """GET a single resource.

        Returns:
            The validated model, the raw JSON when no model is given, or
            None for an empty (204) response.
        """
        response = await self._send("GET", url, params=params)
        return self._parse(response, model)

    async def get_all(
        self,
        url: str,
        model: type[ModelT],
        params: dict[str, str] | None = None,
    ) -> list[ModelT]:
        """GET a list resource, following ``rel="next"`` links to the end."""
        items: list[ModelT] = []
        next_url: str | None = url
        page_params = params

        while next_url:
            response = await self._send("GET", next_url, params=page_params)
            items.extend(model.model_validate(item) for item in response.json())
            next_url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            page_params = None
            if next_url:
                logger.debug("Following next page %s", next_url)

        return items

    async def post(
        self,
        url: str,
        body: BaseModel | dict[str, Any],
        model: type[ModelT] | None = None,
    ) -> Any:
        """POST a JSON body and return the parsed response."""
        response = await self._send("POST", url, json=self._serialize(body))
        return self._parse(response, model)

    async def patch(
        self,
        url: str,
        body: BaseModel | dict[str, Any],
        model: type[ModelT] | None = None,
    ) -> Any:
        """PATCH a JSON body and return the parsed response."""
        response = await self._send("PATCH", url, json=self._serialize(body))
        return self._parse(response, model)

    async def delete(self, url: str) -> None:
        """DELETE a resource."""
        await self._send("DELETE", url)

    async def _send(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, url)
        response = await self._http.request(
            method, url, params=params, json=json, headers=self._headers
        )
        self._raise_for_status(response)
        return response

    @staticmethod
    def _serialize(body: BaseModel | dict[str, Any]) -> Any:
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", exclude_unset=True)
        return body

    @staticmethod
    def _parse(response: httpx.Response, model: type[ModelT] | None) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        data = response.json()
        if model is None:
            return data
        return model.model_validate(data)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if not response.is_error:
            return

        message = response.text
        documentation_url = None
        errors = None
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            message = payload.get("message", message)
            documentation_url = payload.get("documentation_url")
            errors = payload.get("errors")

        logger.debug(
            "Request to %s failed with %s: %s",
            response.request.url,
            response.status_code,
            message,
        )

        if response.status_code == 422:
            raise ApiValidationError(
                message, response.status_code, documentation_url, errors
            )
        error_class = _STATUS_ERRORS.get(response.status_code, ApiError)
        raise error_class(message, response.status_code, documentation_url)
