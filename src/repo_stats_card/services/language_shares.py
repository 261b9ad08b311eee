"""Language share computation — byte counts → rounded percentages.

Percentages are rounded to one decimal place with the largest-remainder
method, so the shares of one repository always add up to exactly 100.0 and
no single share is more than 0.1 away from its exact value.
"""

from __future__ import annotations

from typing import Mapping

from repo_stats_card.domain.entities import LanguageShare
from repo_stats_card.services.formatting import language_color

# Percentages are allocated in tenths of a percent.
_SCALE = 1000


def sort_languages(languages: Mapping[str, int]) -> list[tuple[str, int]]:
    """Order ``(language, bytes)`` pairs by descending byte count, stable on ties."""
    return sorted(languages.items(), key=lambda item: item[1], reverse=True)


def top_languages(languages: Mapping[str, int], limit: int | None) -> dict[str, int]:
    """Keep the *limit* largest languages; ``None`` or ``0`` keeps them all."""
    ordered = sort_languages(languages)
    if limit:
        ordered = ordered[:limit]
    return dict(ordered)


def compute_language_shares(languages: Mapping[str, int]) -> list[LanguageShare]:
    """Return one :class:`LanguageShare` per language, largest first.

    An empty mapping (or one whose byte counts sum to zero) yields no entries.
    """
    ordered = sort_languages(languages)
    total = sum(size for _, size in ordered)
    if total <= 0:
        return []

    tenths: list[int] = []
    remainders: list[tuple[int, int]] = []
    for index, (_, size) in enumerate(ordered):
        quotient, remainder = divmod(size * _SCALE, total)
        tenths.append(quotient)
        remainders.append((remainder, index))

    leftover = _SCALE - sum(tenths)
    # Largest remainder first; earlier (bigger) languages win ties.
    remainders.sort(key=lambda item: (-item[0], item[1]))
    for _, index in remainders[:leftover]:
        tenths[index] += 1

    return [
        LanguageShare(
            language=language,
            bytes=size,
            percentage=share / 10,
            color=language_color(language),
        )
        for (language, size), share in zip(ordered, tenths)
    ]
