"""Card renderer — RepositoryStats → self-contained HTML fragment.

Every piece of repository-provided text goes through :func:`escape_html`
before it reaches the markup.
"""

from __future__ import annotations

from typing import Sequence

from repo_stats_card.domain.entities import LanguageShare, RepositoryStats
from repo_stats_card.services.formatting import escape_html, format_date, format_number
from repo_stats_card.services.language_shares import compute_language_shares
from repo_stats_card.services.pie_chart import render_pie_segments

_STAR_ICON = (
    '<path d="M8 .25a.75.75 0 0 1 .673.418l1.882 3.815 4.21.612a.75.75 0 0 1 .416 1.279'
    "l-3.046 2.97.719 4.192a.75.75 0 0 1-1.088.791L8 12.347l-3.766 1.98a.75.75 0 0 1"
    "-1.088-.79l.72-4.194L.818 6.374a.75.75 0 0 1 .416-1.28l4.21-.611L7.327.668A.75.75"
    ' 0 0 1 8 .25Z"/>'
)
_FORK_ICON = (
    '<path d="M5 5.372v.878c0 .414.336.75.75.75h4.5a.75.75 0 0 0 .75-.75v-.878a2.25 2.25'
    " 0 1 1 1.5 0v.878a2.25 2.25 0 0 1-2.25 2.25h-1.5v2.128a2.251 2.251 0 1 1-1.5 0V8.5"
    "h-1.5A2.25 2.25 0 0 1 3.5 6.25v-.878a2.25 2.25 0 1 1 1.5 0ZM5 3.25a.75.75 0 1 0-1.5"
    " 0 .75.75 0 0 0 1.5 0Zm6.75.75a.75.75 0 1 0 0-1.5.75.75 0 0 0 0 1.5Zm-3 8.75a.75.75"
    ' 0 1 0-1.5 0 .75.75 0 0 0 1.5 0Z"/>'
)
_ISSUE_ICON = (
    '<path d="M8 9.5a1.5 1.5 0 1 0 0-3 1.5 1.5 0 0 0 0 3Z"/>'
    '<path d="M8 0a8 8 0 1 1 0 16A8 8 0 0 1 8 0ZM1.5 8a6.5 6.5 0 1 0 13 0 6.5 6.5 0 0 0'
    '-13 0Z"/>'
)


def _stat(icon: str, value: int, label: str) -> str:
    return (
        '<div class="stat-card-stat">'
        f'<svg class="stat-card-stat-icon" viewBox="0 0 16 16" aria-hidden="true">{icon}</svg>'
        f'<span class="stat-card-stat-value">{format_number(value)}</span>'
        f"<span>{label}</span>"
        "</div>"
    )


def _date(label: str, value: str) -> str:
    return (
        '<div class="stat-card-date">'
        f'<span class="stat-card-date-label">{label}</span>'
        f'<time datetime="{escape_html(value)}">{format_date(value)}</time>'
        "</div>"
    )


def render_linear_segments(shares: Sequence[LanguageShare]) -> str:
    """Bar chart segments, each as wide as its language's percentage."""
    return "".join(
        f'<div class="stat-card-language-segment" '
        f'style="width: {s.percentage:.1f}%; background-color: {s.color};" '
        f'title="{escape_html(s.language)}: {s.percentage:.1f}%"></div>'
        for s in shares
    )


def render_language_items(shares: Sequence[LanguageShare]) -> str:
    return "".join(
        '<li class="stat-card-language-item">'
        f'<span class="stat-card-language-dot" style="background-color: {s.color};" '
        'aria-hidden="true"></span>'
        f"<span>{escape_html(s.language)}</span>"
        f'<span class="stat-card-language-percentage">{s.percentage:.1f}%</span>'
        "</li>"
        for s in shares
    )


def _summary(stats: RepositoryStats, shares: Sequence[LanguageShare]) -> str:
    """Screen-reader sentence with the headline numbers and top three languages."""
    text = (
        f"Repository statistics: {format_number(stats.stargazers_count)} stars, "
        f"{format_number(stats.forks_count)} forks, "
        f"{format_number(stats.open_issues_count)} open issues."
    )
    if shares:
        top = ", ".join(f"{s.language} {s.percentage:.1f}%" for s in shares[:3])
        text += f" Main languages: {top}."
    return escape_html(text)


def render_card(stats: RepositoryStats) -> str:
    """Build the full card markup for *stats*."""
    shares = compute_language_shares(stats.languages)
    url = escape_html(stats.html_url)

    return f"""\
<div class="stat-card-container">
  <article class="stat-card">
    <div class="stat-card-layout">
      <div class="stat-card-main">
        <header class="stat-card-header">
          <h1 class="stat-card-title">
            <a href="{url}" class="stat-card-link" target="_blank" rel="noopener noreferrer">{escape_html(stats.name)}</a>
          </h1>
          <p class="stat-card-full-name">{escape_html(stats.full_name)}</p>
        </header>
        <div class="stat-card-stats" role="group" aria-label="Repository statistics">
          {_stat(_STAR_ICON, stats.stargazers_count, 'stars')}
          {_stat(_FORK_ICON, stats.forks_count, 'forks')}
          {_stat(_ISSUE_ICON, stats.open_issues_count, 'issues')}
        </div>
        <p class="stat-card-description">{escape_html(stats.description)}</p>
        <div class="stat-card-dates">
          {_date('Created', stats.created_at)}
          {_date('Updated', stats.updated_at)}
        </div>
      </div>
      <div class="stat-card-chart-section">
        <section aria-labelledby="languages-title">
          <h2 class="stat-card-languages-title" id="languages-title">Languages</h2>
          <svg class="stat-card-pie-chart" viewBox="0 0 100 100" role="img" aria-label="Programming languages distribution pie chart">
            {render_pie_segments(shares)}
          </svg>
          <div class="stat-card-linear-chart" role="img" aria-label="Programming languages distribution chart">
            <div class="stat-card-languages-bar">{render_linear_segments(shares)}</div>
          </div>
          <ul class="stat-card-languages-list">{render_language_items(shares)}</ul>
        </section>
      </div>
    </div>
    <span class="stat-card-sr-only">{_summary(stats, shares)}</span>
  </article>
</div>
"""


def render_error(message: str) -> str:
    """Minimal fragment shown in place of the card when loading fails."""
    return f"""\
<div class="github-stats-card error">
  <p>❌ Error loading repository statistics</p>
  <p class="error-message">{escape_html(message)}</p>
</div>
"""
