"""Registered-people page: registrants whose forms were uploaded."""
import logging
from typing import Any, Dict, List

import streamlit as st

from src.config import get_settings
from src.services.backend import get_registrant_repository
from src.services.listing_service import (
    EMPTY_STATE_MESSAGE,
    LISTING_COLUMNS,
    build_listing_rows,
    get_registered_people,
    summary_line,
)
from src.ui.html_utils import card, html_block, text
from src.utils.exceptions import StorageError

logger = logging.getLogger(__name__)


def _render_status_badge(status: str) -> str:
    """Green pill used for the Status column."""
    return (
        "<span style=\"background: #10b9811a; color: #059669; border: 1px solid #10b98133; "
        f"border-radius: 9999px; padding: 2px 10px; font-size: 12px; font-weight: 600;\">{text(status)}</span>"
    )


def _render_people_table(rows: List[Dict[str, Any]]) -> str:
    """Build the HTML table for listing rows."""
    head = "".join(f"<th>{text(column)}</th>" for column in LISTING_COLUMNS)
    body = []
    for row in rows:
        cells = [
            f"<td class='hr-index'>{text(row['#'])}</td>",
            f"<td>{text(row['Name'])}</td>",
            f"<td>{text(row['Age'])}</td>",
            f"<td>{text(row['Country'])}</td>",
            f"<td>{text(row['Date'])}</td>",
            f"<td>{_render_status_badge(row['Status'])}</td>",
        ]
        body.append(f"<tr>{''.join(cells)}</tr>")

    return html_block(
        f"""
        <table class="hr-table">
          <thead><tr>{head}</tr></thead>
          <tbody>{''.join(body)}</tbody>
        </table>
        """
    )


def _render_empty_state() -> str:
    return card(f"<p class='hr-muted hr-center'>{text(EMPTY_STATE_MESSAGE)}</p>", padding="64px 32px")


def render_registered_people_page() -> None:
    """Render the list of registrants with completed forms."""
    settings = get_settings()

    try:
        registrants = get_registered_people(
            get_registrant_repository(),
            include_showcase=settings.show_showcase_registrants,
        )
    except StorageError:
        logger.exception("Failed to load registered people")
        st.error("❌ Could not load registered people. Please try again later.")
        return

    st.markdown(
        html_block(
            f"""
            <div class="hr-center">
              <div class="hr-step-icon">&#128101;</div>
              <h1>Registered People</h1>
              <p class="hr-muted">{text(summary_line(len(registrants)))}</p>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )

    if not registrants:
        st.markdown(_render_empty_state(), unsafe_allow_html=True)
        return

    st.markdown(card(_render_people_table(build_listing_rows(registrants)), padding="0"), unsafe_allow_html=True)
