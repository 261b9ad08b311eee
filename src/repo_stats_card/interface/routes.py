"""API routes — thin controllers that delegate to the use cases."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, Response

from repo_stats_card.interface.dependencies import get_card_use_case, get_stats_use_case
from repo_stats_card.interface.schemas import ErrorResponse, RepoStatsResponse
from repo_stats_card.services.get_repo_stats import GetRepoStatsUseCase
from repo_stats_card.services.render_card import RenderCardUseCase
from repo_stats_card.services.styles import CARD_CSS

router = APIRouter()

TopQuery = Annotated[
    int | None,
    Query(ge=0, description="Keep only the N largest languages (0 keeps all)."),
]


@router.get(
    "/repos/{owner}/{name}/stats",
    response_model=RepoStatsResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid repository name"},
        404: {"model": ErrorResponse, "description": "Repository not found"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "GitHub API request failed"},
    },
)
async def repo_stats(
    owner: str,
    name: str,
    top: TopQuery = None,
    use_case: GetRepoStatsUseCase = Depends(get_stats_use_case),
) -> RepoStatsResponse:
    """Return the normalized statistics of a public GitHub repository."""
    stats = await use_case.execute(f"{owner}/{name}", max_languages=top)
    return RepoStatsResponse.from_stats(stats)


@router.get("/repos/{owner}/{name}/card", response_class=HTMLResponse)
async def repo_card(
    owner: str,
    name: str,
    top: TopQuery = None,
    use_case: RenderCardUseCase = Depends(get_card_use_case),
) -> HTMLResponse:
    """Return the card fragment, or an error fragment when loading fails."""
    return HTMLResponse(await use_case.render(f"{owner}/{name}", max_languages=top))


@router.get("/repos/{owner}/{name}/page", response_class=HTMLResponse)
async def repo_page(
    owner: str,
    name: str,
    top: TopQuery = None,
    use_case: RenderCardUseCase = Depends(get_card_use_case),
) -> HTMLResponse:
    """Return a standalone HTML page embedding the card and its stylesheet."""
    return HTMLResponse(await use_case.render_page(f"{owner}/{name}", max_languages=top))


@router.get("/styles.css", include_in_schema=False)
async def stylesheet() -> Response:
    return Response(content=CARD_CSS, media_type="text/css")
