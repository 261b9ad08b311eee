from repo_stats_card.services.styles import (
    CARD_CSS,
    STYLE_ELEMENT_ID,
    has_styles,
    inject_styles,
    render_page,
)

_DOC = "<html><head><title>x</title></head><body><div id='target'></div></body></html>"


def test_injects_into_head_once():
    once = inject_styles(_DOC)

    assert has_styles(once)
    assert once.index(f'id="{STYLE_ELEMENT_ID}"') < once.index("</head>")
    assert inject_styles(once) == once
    assert once.count("<style") == 1


def test_existing_marked_element_is_respected():
    doc = f"<head><style id='{STYLE_ELEMENT_ID}'>/* custom */</style></head>"
    assert inject_styles(doc) == doc


def test_document_without_head_gets_style_prepended():
    result = inject_styles("<div>card</div>")
    assert result.startswith(f'<style id="{STYLE_ELEMENT_ID}">')
    assert result.endswith("<div>card</div>")


def test_render_page_wraps_fragment():
    page = render_page("<div>card</div>", title="a/b <stats>")

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>a/b &lt;stats&gt;</title>" in page
    assert "<div>card</div>" in page
    assert page.count(f'id="{STYLE_ELEMENT_ID}"') == 1
    assert ".stat-card-pie-segment" in CARD_CSS
