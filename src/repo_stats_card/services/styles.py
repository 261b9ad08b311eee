"""Card stylesheet and its one-time injection into an HTML document."""

from __future__ import annotations

import logging
import re

from repo_stats_card.services.formatting import escape_html

logger = logging.getLogger(__name__)

STYLE_ELEMENT_ID = "github-stats-card-styles"

CARD_CSS = """\
:root {
  --stat-card-surface: #ffffff;
  --stat-card-border: #e1e5e9;
  --stat-card-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
  --stat-card-radius: 12px;
  --stat-card-text-primary: #24292f;
  --stat-card-text-secondary: #656d76;
  --stat-card-text-muted: #8b949e;
  --stat-card-accent: #0969da;
  --stat-card-accent-hover: #0860ca;
  --stat-card-spacing-xs: 4px;
  --stat-card-spacing-sm: 8px;
  --stat-card-spacing-md: 16px;
  --stat-card-spacing-lg: 24px;
  --stat-card-font-sm: 0.875rem;
  --stat-card-font-base: 1rem;
  --stat-card-font-lg: 1.125rem;
}

.stat-card-container {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Noto Sans', Helvetica, Arial, sans-serif;
  max-width: 920px;
  margin: 0 auto;
}

.stat-card {
  background: var(--stat-card-surface);
  border: 1px solid var(--stat-card-border);
  border-radius: var(--stat-card-radius);
  box-shadow: var(--stat-card-shadow);
  padding: var(--stat-card-spacing-lg);
  color: var(--stat-card-text-primary);
  transition: box-shadow 0.2s ease;
}

.stat-card:hover {
  box-shadow: 0 4px 16px rgba(0, 0, 0, 0.15);
}

@media (min-width: 768px) {
  .stat-card-layout {
    display: grid;
    grid-template-columns: 1fr 300px;
    gap: var(--stat-card-spacing-lg);
    align-items: start;
  }
}

@media (max-width: 767px) {
  .stat-card-layout {
    display: flex;
    flex-direction: column;
    gap: var(--stat-card-spacing-lg);
  }
}

.stat-card-main {
  min-width: 0;
}

.stat-card-chart-section {
  display: flex;
  flex-direction: column;
  align-items: center;
}

.stat-card-header {
  margin-bottom: var(--stat-card-spacing-lg);
}

.stat-card-title {
  margin: 0 0 var(--stat-card-spacing-xs) 0;
  font-size: var(--stat-card-font-lg);
  font-weight: 600;
  line-height: 1.25;
}

.stat-card-link {
  color: var(--stat-card-accent);
  text-decoration: none;
  transition: color 0.2s ease;
}

.stat-card-link:hover {
  color: var(--stat-card-accent-hover);
  text-decoration: underline;
}

.stat-card-link:focus {
  outline: 2px solid var(--stat-card-accent);
  outline-offset: 2px;
  border-radius: var(--stat-card-spacing-xs);
}

.stat-card-full-name {
  font-size: var(--stat-card-font-sm);
  color: var(--stat-card-text-secondary);
  margin: 0;
}

.stat-card-stats {
  display: flex;
  gap: var(--stat-card-spacing-lg);
  margin-bottom: var(--stat-card-spacing-lg);
  flex-wrap: wrap;
}

.stat-card-stat {
  display: flex;
  align-items: center;
  gap: var(--stat-card-spacing-xs);
  font-size: var(--stat-card-font-sm);
  color: var(--stat-card-text-secondary);
}

.stat-card-stat-icon {
  width: 16px;
  height: 16px;
  fill: currentColor;
}

.stat-card-stat-value {
  font-weight: 600;
  color: var(--stat-card-text-primary);
}

.stat-card-description {
  margin: 0 0 var(--stat-card-spacing-lg) 0;
  font-size: var(--stat-card-font-base);
  line-height: 1.5;
  color: var(--stat-card-text-secondary);
}

.stat-card-dates {
  display: grid;
  grid-template-columns: 1fr 1fr;
  gap: var(--stat-card-spacing-md);
  font-size: var(--stat-card-font-sm);
  color: var(--stat-card-text-muted);
}

.stat-card-date {
  display: flex;
  flex-direction: column;
  gap: var(--stat-card-spacing-xs);
}

.stat-card-date-label {
  font-weight: 500;
  color: var(--stat-card-text-secondary);
}

.stat-card-languages-title {
  margin: 0 0 var(--stat-card-spacing-md) 0;
  font-size: var(--stat-card-font-base);
  font-weight: 600;
  color: var(--stat-card-text-primary);
  text-align: center;
}

.stat-card-pie-chart {
  display: none;
  width: 200px;
  height: 200px;
  margin-bottom: var(--stat-card-spacing-md);
}

@media (min-width: 768px) {
  .stat-card-pie-chart {
    display: block;
  }
  .stat-card-linear-chart {
    display: none;
  }
}

.stat-card-pie-segment {
  transition: opacity 0.2s ease;
  cursor: pointer;
}

.stat-card-pie-segment:hover {
  opacity: 0.8;
}

.stat-card-linear-chart {
  width: 100%;
  margin-bottom: var(--stat-card-spacing-md);
}

.stat-card-languages-bar {
  display: flex;
  height: 8px;
  border-radius: 4px;
  overflow: hidden;
  background: var(--stat-card-border);
}

.stat-card-language-segment {
  height: 100%;
  transition: opacity 0.2s ease;
}

.stat-card-language-segment:hover {
  opacity: 0.8;
}

.stat-card-languages-list {
  display: flex;
  flex-wrap: wrap;
  gap: var(--stat-card-spacing-md);
  list-style: none;
  margin: 0;
  padding: 0;
  justify-content: center;
}

@media (max-width: 767px) {
  .stat-card-languages-list {
    justify-content: flex-start;
  }
}

.stat-card-language-item {
  display: flex;
  align-items: center;
  gap: var(--stat-card-spacing-xs);
  font-size: var(--stat-card-font-sm);
  color: var(--stat-card-text-secondary);
}

.stat-card-language-dot {
  width: 12px;
  height: 12px;
  border-radius: 50%;
  flex-shrink: 0;
}

.stat-card-language-percentage {
  font-weight: 500;
  color: var(--stat-card-text-primary);
}

.stat-card-sr-only {
  position: absolute;
  width: 1px;
  height: 1px;
  padding: 0;
  margin: -1px;
  overflow: hidden;
  clip: rect(0, 0, 0, 0);
  white-space: nowrap;
  border: 0;
}

@media (max-width: 480px) {
  .stat-card {
    padding: var(--stat-card-spacing-md);
  }

  .stat-card-stats {
    gap: var(--stat-card-spacing-md);
  }

  .stat-card-dates {
    grid-template-columns: 1fr;
    gap: var(--stat-card-spacing-sm);
  }

  .stat-card-languages-list {
    gap: var(--stat-card-spacing-sm);
  }
}

@media (prefers-color-scheme: dark) {
  :root {
    --stat-card-surface: #0d1117;
    --stat-card-border: #30363d;
    --stat-card-shadow: 0 2px 8px rgba(0, 0, 0, 0.3);
    --stat-card-text-primary: #f0f6fc;
    --stat-card-text-secondary: #8b949e;
    --stat-card-text-muted: #6e7681;
    --stat-card-accent: #58a6ff;
    --stat-card-accent-hover: #79c0ff;
  }
}

.github-stats-card.error {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Noto Sans', Helvetica, Arial, sans-serif;
  border: 1px solid #f85149;
  border-radius: var(--stat-card-radius);
  padding: var(--stat-card-spacing-md);
  color: var(--stat-card-text-primary);
}

.github-stats-card.error .error-message {
  font-size: var(--stat-card-font-sm);
  color: var(--stat-card-text-secondary);
}
"""

_MARKER_RE = re.compile(rf"""id\s*=\s*["']{STYLE_ELEMENT_ID}["']""", re.IGNORECASE)
_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def style_element() -> str:
    return f'<style id="{STYLE_ELEMENT_ID}">\n{CARD_CSS}</style>'


def has_styles(document: str) -> bool:
    """True when *document* already carries the marked style element."""
    return _MARKER_RE.search(document) is not None


def inject_styles(document: str) -> str:
    """Add the card stylesheet to *document* unless it is already there.

    The element goes right before ``</head>``; documents without a head get
    it prepended. Calling this again on its own output returns it unchanged.
    """
    if has_styles(document):
        logger.debug("Card styles already injected")
        return document

    match = _HEAD_CLOSE_RE.search(document)
    if match is None:
        return f"{style_element()}\n{document}"
    return f"{document[: match.start()]}{style_element()}\n{document[match.start():]}"


def render_page(body: str, title: str = "Repository stats") -> str:
    """Wrap a card (or error) fragment in a standalone HTML page."""
    return inject_styles(_PAGE_TEMPLATE.format(title=escape_html(title), body=body))
