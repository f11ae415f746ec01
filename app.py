"""
HopeRise Foundation registration site
Landing page, registration, form upload and registered-people listing
"""
import logging
import streamlit as st

from src.config import get_settings
from src.ui.landing_page import render_landing_page
from src.ui.layout import PAGES, navigate, render_footer, render_header
from src.ui.register_page import render_register_page
from src.ui.registered_people_page import render_registered_people_page
from src.ui.upload_page import render_upload_page
from src.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)

configure_logging(get_settings().log_level)

# Streamlit page setup
st.set_page_config(
    page_title=get_settings().foundation_name,
    page_icon="💛",
    layout="centered",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Initialize session state defaults."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "home"

    if "selected_registrant_id" not in st.session_state:
        st.session_state.selected_registrant_id = None

    # Deep links such as ?page=upload&id=<registrant id>
    if "url_params_processed" not in st.session_state:
        query_params = st.query_params
        page = query_params.get("page")
        if page in PAGES:
            st.session_state.current_page = page
        if "id" in query_params:
            st.session_state.selected_registrant_id = query_params["id"]
        st.session_state.url_params_processed = True


def apply_custom_css():
    """Apply the site stylesheet."""
    st.markdown("""
        <style>
        /* Global */
        .stApp {
            background: #f8f6f1;
            color: #1a2a44;
        }

        /* Hide Streamlit chrome */
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        header, [data-testid="stHeader"] {
            visibility: hidden;
            height: 0;
        }

        [data-testid="stAppViewContainer"] > .main .block-container {
            padding-top: 1.5rem;
        }

        /* Buttons */
        .stButton > button, .stDownloadButton > button, .stFormSubmitButton > button {
            border-radius: 10px;
            font-weight: 600;
        }

        .stButton > button[kind="primary"],
        .stDownloadButton > button[kind="primary"],
        .stFormSubmitButton > button[kind="primary"] {
            background: linear-gradient(135deg, #d4a537 0%, #f0c75e 100%);
            color: #1a2a44;
            border: none;
        }

        .hr-brand {
            font-size: 1.15rem;
            font-weight: 700;
            padding-top: 6px;
        }

        .hr-heart, .hr-gold {
            color: #d4a537;
        }

        .hr-hero {
            background: linear-gradient(135deg, #1a2a44 0%, #2c4470 100%);
            border-radius: 16px;
            color: #ffffff;
            padding: 56px 32px;
            text-align: center;
            margin: 16px 0 24px 0;
        }

        .hr-hero h1 {
            color: #ffffff;
            font-size: 2.6rem;
        }

        .hr-lead {
            opacity: 0.85;
            font-size: 1.1rem;
        }

        .hr-callout {
            color: #f0c75e;
            font-weight: 600;
            font-size: 1.2rem;
        }

        .hr-section-title {
            text-align: center;
            margin-top: 48px;
        }

        .hr-card {
            background: #ffffff;
            border: 1px solid #e5e1d8;
            border-radius: 12px;
            box-shadow: 0 4px 16px rgba(26, 42, 68, 0.08);
            margin-bottom: 16px;
        }

        .hr-step {
            text-align: center;
            padding: 24px;
            min-height: 220px;
        }

        .hr-step-icon {
            font-size: 2rem;
        }

        .hr-center {
            text-align: center;
        }

        .hr-muted {
            color: #6b7280;
        }

        .hr-check {
            color: #10b981;
            font-size: 2.5rem;
        }

        .hr-table {
            width: 100%;
            border-collapse: collapse;
        }

        .hr-table th {
            background: #f3f1ec;
            text-align: left;
            padding: 12px;
        }

        .hr-table td {
            border-top: 1px solid #eeeae2;
            padding: 12px;
        }

        .hr-index {
            font-weight: 600;
        }

        .hr-footer {
            background: #1a2a44;
            border-radius: 12px;
            color: #ffffff;
            margin-top: 48px;
            padding: 24px;
            text-align: center;
        }

        .hr-footer-note {
            font-size: 0.75rem;
            opacity: 0.6;
        }
        </style>
    """, unsafe_allow_html=True)


def render_current_page():
    """Render the page selected in session state."""
    try:
        page = st.session_state.current_page

        if page == "home":
            render_landing_page()

        elif page == "register":
            render_register_page()

        elif page == "upload":
            render_upload_page(st.session_state.selected_registrant_id)

        elif page == "registered":
            render_registered_people_page()

        else:
            st.error(f"Unknown page: {page}")
            if st.button("Back to Home"):
                navigate("home")
                st.rerun()

    except Exception as e:
        # Error boundary
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong. Please try again later.")

        with st.expander("🔍 Error details"):
            st.code(str(e))

        if st.button("Back to Home"):
            navigate("home")
            st.rerun()


def main():
    """Application entry point."""
    initialize_session_state()
    apply_custom_css()
    render_header()
    render_current_page()
    render_footer()


if __name__ == "__main__":
    main()
