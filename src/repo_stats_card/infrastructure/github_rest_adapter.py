"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from repo_stats_card.domain.exceptions import (
    GitHubRateLimitError,
    RepositoryNotFoundError,
    RequestError,
)
from repo_stats_card.domain.value_objects import RepoName

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


def _decode_json(resp: httpx.Response) -> Any:
    """Parse a successful response body, treating non-JSON as a failed request."""
    try:
        return resp.json()
    except ValueError as exc:
        raise RequestError(
            f"GitHub API returned a non-JSON body for {resp.request.url}",
            status_code=resp.status_code,
        ) from exc


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        base_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-stats-card/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_repository(self, repo: RepoName) -> dict[str, Any]:
        """GET /repos/{owner}/{name} → raw repository JSON."""
        resp = await self._api_get(f"/repos/{repo.owner}/{repo.name}")
        data: dict[str, Any] = _decode_json(resp)
        return data

    async def fetch_languages(self, repo: RepoName) -> dict[str, int]:
        """GET /repos/{owner}/{name}/languages → {lang: bytes}."""
        resp = await self._api_get(f"/repos/{repo.owner}/{repo.name}/languages")
        data: dict[str, int] = _decode_json(resp)
        return data

    async def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise RequestError(f"Network error fetching {url}: {exc}") from exc

        if resp.is_success:
            return resp

        status = resp.status_code
        if status == 404:
            raise RepositoryNotFoundError(
                f"Error fetching repository data: {status}. "
                "Make sure the name points to a public repository.",
                status_code=status,
            )

        if status == 403 and resp.headers.get("x-ratelimit-remaining", "") == "0":
            reset_raw = resp.headers.get("x-ratelimit-reset", "")
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw or "unknown"
            raise GitHubRateLimitError(
                f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                "Set the GITHUB_TOKEN environment variable to increase the limit.",
                status_code=status,
            )

        if status == 429:
            raise GitHubRateLimitError(
                "GitHub API rate limit exceeded (HTTP 429).", status_code=status
            )

        raise RequestError(f"Error fetching repository data: {status}", status_code=status)
