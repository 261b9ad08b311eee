import re

import pytest

from repo_stats_card.services.language_shares import compute_language_shares
from repo_stats_card.services.pie_chart import build_pie_slices, render_pie_segments

_ARC_RE = re.compile(r"A 40 40 0 ([01]) 1 ")


def test_two_languages_close_the_circle():
    slices = build_pie_slices(compute_language_shares({"Go": 80, "TypeScript": 20}))

    assert len(slices) == 2
    assert slices[0].start_angle == 0
    assert slices[0].end_angle == pytest.approx(288)
    assert slices[1].start_angle == slices[0].end_angle
    assert slices[1].end_angle == 360

    flags = [_ARC_RE.findall(s.path) for s in slices]
    # 288° needs the large arc, 72° does not
    assert flags == [["1"], ["0"]]


def test_slice_path_geometry():
    go, ts = build_pie_slices(compute_language_shares({"Go": 80, "TypeScript": 20}))
    assert go.path == "M 50 50 L 90.000 50.000 A 40 40 0 1 1 62.361 11.958 Z"
    assert ts.path == "M 50 50 L 62.361 11.958 A 40 40 0 0 1 90.000 50.000 Z"


def test_half_and_half_uses_small_arcs():
    slices = build_pie_slices(compute_language_shares({"Go": 50, "Rust": 50}))
    assert [s.large_arc for s in slices] == [False, False]
    assert slices[-1].end_angle == 360


def test_uneven_shares_still_end_at_360():
    slices = build_pie_slices(compute_language_shares({"A": 1, "B": 1, "C": 1}))
    assert slices[-1].end_angle == 360
    for prev, cur in zip(slices, slices[1:]):
        assert cur.start_angle == prev.end_angle


def test_single_language_is_a_full_circle():
    (only,) = build_pie_slices(compute_language_shares({"Python": 10}))
    assert only.end_angle - only.start_angle == 360
    assert len(_ARC_RE.findall(only.path)) == 2


def test_no_shares_no_segments():
    assert build_pie_slices([]) == []
    assert render_pie_segments([]) == ""


def test_render_pie_segments_escapes_language_names():
    markup = render_pie_segments(compute_language_shares({"<b>": 1}))
    assert markup.count("<path ") == 1
    assert "&lt;b&gt;: 100.0%" in markup
    assert 'fill="#8b949e"' in markup
