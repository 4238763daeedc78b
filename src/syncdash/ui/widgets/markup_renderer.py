"""Markup → HTML conversion for QTextBrowser."""

from __future__ import annotations

from html import escape

from syncdash.data.markup import parse_markup
from syncdash.models.markup import Block, Heading, ListItem, Paragraph, Span
from syncdash.ui.theme import COLORS, FONT_FAMILY

# Heading levels map one step down, as agent text sits inside a card.
_HEADING_TAGS = {1: "h2", 2: "h3", 3: "h4"}


def render_markup(text: str | None) -> str:
    """Convert agent free text into an HTML fragment."""
    return "".join(_render_block(block) for block in parse_markup(text))


def render_spans(spans: list[Span]) -> str:
    return "".join(
        f"<strong>{escape(span.text)}</strong>" if span.emphasized else escape(span.text)
        for span in spans
    )


def _render_block(block: Block) -> str:
    match block:
        case Heading(level=level, text=text):
            tag = _HEADING_TAGS.get(level, "h4")
            return f"<{tag}>{escape(text)}</{tag}>"
        case ListItem(ordered=True, spans=spans):
            return f'<ol class="item"><li>{render_spans(spans)}</li></ol>'
        case ListItem(spans=spans):
            return f'<ul class="item"><li>{render_spans(spans)}</li></ul>'
        case Paragraph(spans=spans):
            return f"<p>{render_spans(spans)}</p>"
        case _:
            return '<div class="spacer">&nbsp;</div>'


def wrap_html(body: str) -> str:
    """Wrap an HTML body with the dashboard's document styles."""
    return f"""<!DOCTYPE html>
<html><head><style>
body {{
    font-family: {FONT_FAMILY};
    font-size: 13px;
    color: {COLORS["text"]};
    line-height: 1.5;
    margin: 0;
    padding: 0;
}}
p {{ margin: 0 0 6px 0; }}
strong {{ color: {COLORS["text_strong"]}; font-weight: 600; }}
h2, h3, h4 {{ margin: 10px 0 4px 0; color: {COLORS["text_strong"]}; }}
h2 {{ font-size: 17px; }}
h3 {{ font-size: 15px; }}
h4 {{ font-size: 13px; }}
ul.item, ol.item {{ margin: 0; padding-left: 20px; }}
.spacer {{ font-size: 4px; }}
.muted {{ color: {COLORS["text_muted"]}; }}
.badge {{ font-size: 11px; font-weight: 600; }}
table {{ border-collapse: collapse; width: 100%; margin: 6px 0; }}
th {{ color: {COLORS["text_muted"]}; font-weight: 500; text-align: left; padding: 4px 6px; }}
td {{ padding: 4px 6px; border-top: 1px solid {COLORS["border"]}; }}
</style></head><body>{body}</body></html>"""
