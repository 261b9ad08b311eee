"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class RepoStatsCardError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidInputError(RepoStatsCardError):
    """A required argument (repository identifier) is missing or malformed."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class RequestError(RepoStatsCardError):
    """A GitHub API request failed.

    ``status_code`` is the HTTP status of the failing response, or ``None``
    when the request never produced one (connection error, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RepositoryNotFoundError(RequestError):
    """The repository does not exist or is not public (404)."""


class GitHubRateLimitError(RequestError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""
