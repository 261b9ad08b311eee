"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from repo_stats_card.domain.exceptions import InvalidInputError

_REPO_NAME_RE = re.compile(r"^(?P<owner>[A-Za-z0-9\-_.]+)/(?P<name>[A-Za-z0-9\-_.]+)$")


@dataclass(frozen=True, slots=True)
class RepoName:
    """Validated ``owner/name`` repository identifier.

    Rejects empty input and anything that is not exactly two path segments,
    e.g. ``psf/requests``.
    """

    owner: str
    name: str

    @classmethod
    def from_string(cls, value: str | None) -> RepoName:
        """Parse and validate a raw identifier string."""
        value = (value or "").strip()
        if not value:
            raise InvalidInputError("A repository name is required.")
        match = _REPO_NAME_RE.match(value)
        if not match:
            raise InvalidInputError(
                f"Invalid repository name: '{value}'. Expected format: <owner>/<name>"
            )
        return cls(owner=match["owner"], name=match["name"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
