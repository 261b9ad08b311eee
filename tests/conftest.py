from __future__ import annotations

from typing import Any

import pytest

from repo_stats_card.domain.value_objects import RepoName


class FakeFetcher:
    """In-memory RepoFetcher; raises *error* from the endpoint named in *fail_on*."""

    def __init__(
        self,
        repo_data: dict[str, Any],
        languages: dict[str, int],
        error: Exception | None = None,
        fail_on: str = "languages",
    ) -> None:
        self.repo_data = repo_data
        self.languages = languages
        self.error = error
        self.fail_on = fail_on
        self.calls: list[tuple[str, str]] = []

    async def fetch_repository(self, repo: RepoName) -> dict[str, Any]:
        self.calls.append(("repository", repo.full_name))
        if self.error is not None and self.fail_on == "repository":
            raise self.error
        return self.repo_data

    async def fetch_languages(self, repo: RepoName) -> dict[str, int]:
        self.calls.append(("languages", repo.full_name))
        if self.error is not None and self.fail_on == "languages":
            raise self.error
        return self.languages


@pytest.fixture
def repo_json() -> dict[str, Any]:
    return {
        "name": "hello-world",
        "full_name": "octocat/hello-world",
        "html_url": "https://github.com/octocat/hello-world",
        "stargazers_count": 42,
        "forks_count": 7,
        "open_issues_count": 1,
        "description": None,
        "created_at": "2024-01-05T10:00:00Z",
        "updated_at": "2025-03-20T18:45:12Z",
    }


@pytest.fixture
def languages_json() -> dict[str, int]:
    return {"TypeScript": 20, "Go": 80}


@pytest.fixture
def fake_fetcher(repo_json: dict[str, Any], languages_json: dict[str, int]) -> FakeFetcher:
    return FakeFetcher(repo_json, languages_json)


@pytest.fixture
def fetcher_factory(repo_json: dict[str, Any], languages_json: dict[str, int]):
    def _make(error: Exception | None = None, fail_on: str = "languages") -> FakeFetcher:
        return FakeFetcher(repo_json, languages_json, error=error, fail_on=fail_on)

    return _make
