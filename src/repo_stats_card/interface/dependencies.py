"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx
from fastapi import Depends

from repo_stats_card.infrastructure.config import get_settings
from repo_stats_card.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_stats_card.services.get_repo_stats import GetRepoStatsUseCase
from repo_stats_card.services.render_card import RenderCardUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_stats_use_case() -> GetRepoStatsUseCase:
    """Build the stats use-case with the GitHub adapter injected."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(
        client=_http_client, token=token, base_url=settings.github_api_url
    )

    return GetRepoStatsUseCase(
        repo_fetcher=github_adapter,
        max_languages=settings.max_languages,
        default_description=settings.default_description,
    )


def get_card_use_case(
    stats_use_case: GetRepoStatsUseCase = Depends(get_stats_use_case),
) -> RenderCardUseCase:
    return RenderCardUseCase(stats_use_case)
