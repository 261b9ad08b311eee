"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel

from repo_stats_card.domain.entities import RepositoryStats
from repo_stats_card.services.language_shares import compute_language_shares


class LanguageShareResponse(BaseModel):
    language: str
    bytes: int
    percentage: float
    color: str


class RepoStatsResponse(BaseModel):
    """Successful response from ``GET /repos/{owner}/{name}/stats``."""

    name: str
    full_name: str
    html_url: str
    stargazers_count: int
    forks_count: int
    open_issues_count: int
    description: str
    created_at: str
    updated_at: str
    languages: dict[str, int]
    language_shares: list[LanguageShareResponse]

    @classmethod
    def from_stats(cls, stats: RepositoryStats) -> RepoStatsResponse:
        return cls(
            name=stats.name,
            full_name=stats.full_name,
            html_url=stats.html_url,
            stargazers_count=stats.stargazers_count,
            forks_count=stats.forks_count,
            open_issues_count=stats.open_issues_count,
            description=stats.description,
            created_at=stats.created_at,
            updated_at=stats.updated_at,
            languages=dict(stats.languages),
            language_shares=[
                LanguageShareResponse(
                    language=s.language,
                    bytes=s.bytes,
                    percentage=s.percentage,
                    color=s.color,
                )
                for s in compute_language_shares(stats.languages)
            ],
        )


class ErrorResponse(BaseModel):
    """`{"status": "error", "message": ...}` body of the JSON error responses."""

    status: str = "error"
    message: str
