"""Utilities for preparing HTML snippets before rendering in Streamlit."""
from html import escape
from textwrap import dedent
from typing import Any


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Streamlit's Markdown renderer interprets lines with >=4 leading spaces as
    code blocks. We dedent and strip leading whitespace on each line to avoid
    that while keeping the markup intact.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def text(value: Any) -> str:
    """Escape a value for interpolation into HTML."""
    return escape("" if value is None else str(value))


def card(inner_html: str, padding: str = "32px") -> str:
    """Wrap markup in the site's white card."""
    return html_block(
        f"""
        <div class="hr-card" style="padding: {padding};">
        {inner_html}
        </div>
        """
    )
