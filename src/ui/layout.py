"""Page chrome shared by all views: navigation, header and footer."""
from datetime import datetime
from typing import Optional

import streamlit as st

from src.config import get_settings
from src.ui.html_utils import html_block, text

PAGES = ("home", "register", "upload", "registered")

# Registration page state, cleared whenever the form is opened from navigation
REGISTER_SUBMITTED_KEY = "register_submitted"
REGISTER_REGISTRANT_KEY = "register_current_registrant"


def navigate(page: str, registrant_id: Optional[str] = None) -> None:
    """Switch the current page and mirror it in the URL for deep links."""
    st.session_state.current_page = page
    st.session_state.selected_registrant_id = registrant_id

    st.query_params.clear()
    if page != "home":
        st.query_params["page"] = page
    if registrant_id:
        st.query_params["id"] = registrant_id


def start_registration() -> None:
    """Open the registration page with an empty form."""
    st.session_state.pop(REGISTER_SUBMITTED_KEY, None)
    st.session_state.pop(REGISTER_REGISTRANT_KEY, None)
    navigate("register")


def render_header() -> None:
    """Render the brand bar and navigation buttons."""
    settings = get_settings()

    brand_col, home_col, register_col, people_col = st.columns([3, 1, 1, 1.4], gap="small")
    with brand_col:
        st.markdown(
            html_block(
                f"""
                <div class="hr-brand">
                  <span class="hr-heart">&#9829;</span>
                  <span>{text(settings.foundation_name)}</span>
                </div>
                """
            ),
            unsafe_allow_html=True,
        )

    current = st.session_state.get("current_page", "home")
    with home_col:
        if st.button("Home", use_container_width=True, key="nav_home",
                     type="primary" if current == "home" else "secondary"):
            navigate("home")
            st.rerun()
    with register_col:
        if st.button("Register", use_container_width=True, key="nav_register",
                     type="primary" if current == "register" else "secondary"):
            start_registration()
            st.rerun()
    with people_col:
        if st.button("Registered People", use_container_width=True, key="nav_registered",
                     type="primary" if current == "registered" else "secondary"):
            navigate("registered")
            st.rerun()


def footer_html(foundation_name: str, year: Optional[int] = None) -> str:
    year = year or datetime.now().year
    name = text(foundation_name)
    return html_block(
        f"""
        <div class="hr-footer">
          <div class="hr-footer-brand"><span class="hr-heart">&#9829;</span> {name}</div>
          <div class="hr-footer-note">&copy; {year} {name}. Empowering lives through financial support.</div>
        </div>
        """
    )


def render_footer() -> None:
    st.markdown(footer_html(get_settings().foundation_name), unsafe_allow_html=True)
