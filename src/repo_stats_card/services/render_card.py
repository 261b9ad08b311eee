"""Render-card use case — fetch, normalize and render in one step.

Unlike :class:`GetRepoStatsUseCase`, failures while loading the data do not
reach the caller: they are logged and the card is replaced by an error
fragment. Invalid input is still raised, since it is the caller's mistake.
"""

from __future__ import annotations

import logging

from repo_stats_card.domain.exceptions import InvalidInputError, RepoStatsCardError
from repo_stats_card.services.card_renderer import render_card, render_error
from repo_stats_card.services.get_repo_stats import GetRepoStatsUseCase
from repo_stats_card.services.styles import render_page as wrap_page

logger = logging.getLogger(__name__)


class RenderCardUseCase:
    """Produces card markup (or error markup) for a repository."""

    def __init__(self, stats_use_case: GetRepoStatsUseCase) -> None:
        self._stats = stats_use_case

    async def render(self, repo_name: str | None, *, max_languages: int | None = None) -> str:
        """Return the card fragment, or the error fragment if loading fails."""
        try:
            stats = await self._stats.execute(repo_name, max_languages=max_languages)
        except InvalidInputError:
            raise
        except RepoStatsCardError as exc:
            logger.warning("Error creating card for %s: %s", repo_name, exc)
            return render_error(str(exc))
        return render_card(stats)

    async def render_page(
        self, repo_name: str | None, *, max_languages: int | None = None
    ) -> str:
        """Return a standalone HTML page with the styles injected once."""
        body = await self.render(repo_name, max_languages=max_languages)
        return wrap_page(body, title=f"{repo_name} · repository stats")
