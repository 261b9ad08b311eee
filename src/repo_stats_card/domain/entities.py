"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_DESCRIPTION = "No description provided"


@dataclass(frozen=True, slots=True)
class RepositoryStats:
    """Normalized summary of a GitHub repository and its language breakdown.

    ``languages`` is ordered by descending byte count and is exposed
    read-only; the record is built once per request and never mutated.
    """

    name: str
    full_name: str
    html_url: str
    stargazers_count: int
    forks_count: int
    open_issues_count: int
    description: str
    created_at: str
    updated_at: str
    languages: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.languages, MappingProxyType):
            object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))


@dataclass(frozen=True, slots=True)
class LanguageShare:
    """A language's byte count expressed as a share of the repository total."""

    language: str
    bytes: int
    percentage: float
    color: str


@dataclass(frozen=True, slots=True)
class PieSlice:
    """One circular sector of the languages pie chart."""

    share: LanguageShare
    start_angle: float
    end_angle: float
    large_arc: bool
    path: str
