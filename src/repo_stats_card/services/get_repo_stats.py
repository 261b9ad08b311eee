"""Get-repository-stats use case — fetch and normalize.

Depends only on the :class:`RepoFetcher` port; the interface layer injects
the concrete GitHub adapter at runtime. Errors are propagated unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Mapping

from repo_stats_card.domain.entities import DEFAULT_DESCRIPTION, RepositoryStats
from repo_stats_card.domain.exceptions import RequestError
from repo_stats_card.domain.ports.repo_fetcher import RepoFetcher
from repo_stats_card.domain.value_objects import RepoName
from repo_stats_card.services.language_shares import top_languages

logger = logging.getLogger(__name__)


def normalize(
    repo_data: Mapping[str, Any],
    languages: Mapping[str, int],
    *,
    default_description: str = DEFAULT_DESCRIPTION,
    max_languages: int | None = None,
) -> RepositoryStats:
    """Map raw API JSON onto a :class:`RepositoryStats` record.

    A payload missing required fields or carrying unparseable timestamps is
    reported as a :class:`RequestError`, like any other bad upstream answer.
    """
    try:
        for key in ("created_at", "updated_at"):
            datetime.fromisoformat(repo_data[key])
        return RepositoryStats(
            name=repo_data["name"],
            full_name=repo_data["full_name"],
            html_url=repo_data["html_url"],
            stargazers_count=repo_data.get("stargazers_count", 0),
            forks_count=repo_data.get("forks_count", 0),
            open_issues_count=repo_data.get("open_issues_count", 0),
            description=repo_data.get("description") or default_description,
            created_at=repo_data["created_at"],
            updated_at=repo_data["updated_at"],
            languages=top_languages(languages, max_languages),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise RequestError(f"Unexpected repository data from GitHub: {exc!r}") from exc


class GetRepoStatsUseCase:
    """Fetches repository metadata and languages, returns one normalized record.

    Parameters
    ----------
    repo_fetcher:
        Adapter that can fetch repository JSON and language bytes.
    max_languages:
        Keep only this many languages (largest first); ``None``/``0`` keeps all.
    default_description:
        Placeholder used when the repository has no description.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        max_languages: int | None = None,
        default_description: str = DEFAULT_DESCRIPTION,
    ) -> None:
        self._fetcher = repo_fetcher
        self._max_languages = max_languages
        self._default_description = default_description

    async def execute(
        self, repo_name: str | None, *, max_languages: int | None = None
    ) -> RepositoryStats:
        """Fetch both endpoints concurrently and normalize the result.

        *max_languages* overrides the configured limit for this call.
        """
        repo = RepoName.from_string(repo_name)
        logger.info("Fetching stats for %s", repo.full_name)

        repo_data, languages = await asyncio.gather(
            self._fetcher.fetch_repository(repo),
            self._fetcher.fetch_languages(repo),
        )

        limit = max_languages if max_languages is not None else self._max_languages
        stats = normalize(
            repo_data,
            languages,
            default_description=self._default_description,
            max_languages=limit,
        )
        logger.debug(
            "%s: %d stars, %d languages", stats.full_name, stats.stargazers_count, len(stats.languages)
        )
        return stats
