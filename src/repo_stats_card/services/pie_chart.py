"""Pie chart geometry — language shares → SVG sector paths."""

from __future__ import annotations

import math
from typing import Sequence

from repo_stats_card.domain.entities import LanguageShare, PieSlice
from repo_stats_card.services.formatting import escape_html

CENTER_X = 50
CENTER_Y = 50
RADIUS = 40


def _polar(angle_deg: float) -> tuple[float, float]:
    rad = math.radians(angle_deg)
    return CENTER_X + RADIUS * math.cos(rad), CENTER_Y + RADIUS * math.sin(rad)


def _arc_path(start_deg: float, end_deg: float) -> str:
    """Move to the centre, line to the start point, arc to the end point, close."""
    x1, y1 = _polar(start_deg)
    if end_deg - start_deg >= 360:
        # A single arc whose endpoints coincide draws nothing; split in two.
        xm, ym = _polar(start_deg + 180)
        x2, y2 = _polar(end_deg)
        return (
            f"M {CENTER_X} {CENTER_Y} "
            f"L {x1:.3f} {y1:.3f} "
            f"A {RADIUS} {RADIUS} 0 0 1 {xm:.3f} {ym:.3f} "
            f"A {RADIUS} {RADIUS} 0 0 1 {x2:.3f} {y2:.3f} Z"
        )
    x2, y2 = _polar(end_deg)
    large = 1 if end_deg - start_deg > 180 else 0
    return (
        f"M {CENTER_X} {CENTER_Y} "
        f"L {x1:.3f} {y1:.3f} "
        f"A {RADIUS} {RADIUS} 0 {large} 1 {x2:.3f} {y2:.3f} Z"
    )


def build_pie_slices(shares: Sequence[LanguageShare]) -> list[PieSlice]:
    """Lay the shares out as contiguous sectors starting at 0°.

    The cumulative angle is tracked in tenths of a percent so a complete set
    of shares closes exactly at 360°.
    """
    slices: list[PieSlice] = []
    cumulative = 0
    for share in shares:
        tenths = round(share.percentage * 10)
        start = cumulative * 360 / 1000
        end = (cumulative + tenths) * 360 / 1000
        cumulative += tenths
        slices.append(
            PieSlice(
                share=share,
                start_angle=start,
                end_angle=end,
                large_arc=end - start > 180,
                path=_arc_path(start, end),
            )
        )
    return slices


def render_pie_segments(shares: Sequence[LanguageShare]) -> str:
    """Return the ``<path>`` elements of the pie chart, one per language."""
    segments = []
    for pie_slice in build_pie_slices(shares):
        share = pie_slice.share
        label = escape_html(f"{share.language}: {share.percentage:.1f}%")
        segments.append(
            f'<path d="{pie_slice.path}" fill="{share.color}" '
            f'class="stat-card-pie-segment"><title>{label}</title></path>'
        )
    return "".join(segments)
