"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol

from repo_stats_card.domain.value_objects import RepoName


class RepoFetcher(Protocol):
    """Abstract contract for fetching GitHub repository data."""

    async def fetch_repository(self, repo: RepoName) -> dict[str, Any]:
        """Return the raw repository JSON object."""
        ...

    async def fetch_languages(self, repo: RepoName) -> dict[str, int]:
        """Return language → byte-count mapping from the GitHub Languages API."""
        ...
