"""Landing page with the hero section and the 'How It Works' steps."""
import streamlit as st

from src.config import get_settings
from src.ui.html_utils import html_block, text
from src.ui.layout import navigate, start_registration

HOW_IT_WORKS = [
    {
        "icon": "&#129309;",
        "title": "Register",
        "description": "Fill out a simple registration form with your details to get started.",
    },
    {
        "icon": "&#127942;",
        "title": "Download & Upload",
        "description": "Download your registration form as a PDF and upload it to confirm your entry.",
    },
    {
        "icon": "&#128101;",
        "title": "Get Selected",
        "description": "Our Top 10 Favorites receive direct financial support from the foundation.",
    },
]


def _hero_html(foundation_name: str) -> str:
    return html_block(
        f"""
        <section class="hr-hero">
          <h1>Welcome to <br/><span class="hr-gold">{text(foundation_name)}</span></h1>
          <p class="hr-lead">
            We believe everyone deserves a chance at financial stability. Our foundation is
            dedicated to empowering lives through direct financial support.
          </p>
          <p class="hr-callout">
            &#10024; Register now and stand a chance to be among our
            <u>Top 10 Favorites</u> for financial assistance!
          </p>
        </section>
        """
    )


def _step_card_html(step: dict) -> str:
    return html_block(
        f"""
        <div class="hr-card hr-step">
          <div class="hr-step-icon">{step["icon"]}</div>
          <h3>{text(step["title"])}</h3>
          <p>{text(step["description"])}</p>
        </div>
        """
    )


def render_landing_page() -> None:
    """Render the landing page."""
    settings = get_settings()

    st.markdown(_hero_html(settings.foundation_name), unsafe_allow_html=True)

    _, register_col, people_col, _ = st.columns([1, 1, 1, 1], gap="small")
    with register_col:
        if st.button("Register Now →", type="primary", use_container_width=True, key="hero_register"):
            start_registration()
            st.rerun()
    with people_col:
        if st.button("View Registered People", use_container_width=True, key="hero_registered"):
            navigate("registered")
            st.rerun()

    st.markdown("<h2 class='hr-section-title'>How It Works</h2>", unsafe_allow_html=True)
    for column, step in zip(st.columns(len(HOW_IT_WORKS), gap="medium"), HOW_IT_WORKS):
        with column:
            st.markdown(_step_card_html(step), unsafe_allow_html=True)
