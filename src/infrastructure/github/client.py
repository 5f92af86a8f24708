"""GitHub REST client for public repository listings."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.config import settings
from core.exceptions import ExternalServiceError, GitHubProfileNotFoundError

logger = structlog.get_logger()

REPOS_PER_PAGE = 5
REPOS_SORT = "created:asc"


class GitHubClient:
    """Fetches a user's public repositories from the GitHub API.

    The response body is returned exactly as GitHub sent it.
    """

    def __init__(
        self,
        token: str = settings.github_token,
        base_url: str = settings.github_api_url,
        user_agent: str = settings.github_user_agent,
        timeout: float | None = settings.github_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": self._user_agent}
        if self._token:
            headers["Authorization"] = f"token {self._token}"
        return headers

    async def get_repositories(self, username: str) -> Any:
        """
        Get the five oldest-created public repositories of a GitHub user.

        Args:
            username: GitHub login

        Returns:
            The decoded JSON body of a successful response

        Raises:
            GitHubProfileNotFoundError: GitHub answered with a non-2xx status
            ExternalServiceError: The request failed before any response arrived
        """
        url = f"{self._base_url}/users/{quote(username, safe='')}/repos"
        params = {"per_page": REPOS_PER_PAGE, "sort": REPOS_SORT}

        response: httpx.Response | None = None
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error("github_request_failed", username=username, error=str(e))

        if response is None:
            raise ExternalServiceError("github")

        if not response.is_success:
            logger.info(
                "github_profile_not_found",
                username=username,
                status_code=response.status_code,
            )
            raise GitHubProfileNotFoundError(username)

        return response.json()
