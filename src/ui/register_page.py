"""Registration form, success view and PDF download."""
import logging

import streamlit as st

from src.config import get_settings
from src.models.registrant import Registrant
from src.services.backend import get_functions
from src.services.pdf_service import export_registration_pdf
from src.services.registration_service import submit_registration
from src.ui.html_utils import card, html_block, text
from src.ui.layout import REGISTER_REGISTRANT_KEY, REGISTER_SUBMITTED_KEY, navigate

logger = logging.getLogger(__name__)

DOWNLOADED_MESSAGE = "PDF downloaded successfully!"

GENDER_OPTIONS = ["", "Female", "Male", "Other"]


def _ensure_register_state() -> None:
    """Ensure registration state keys exist."""
    if REGISTER_SUBMITTED_KEY not in st.session_state:
        st.session_state[REGISTER_SUBMITTED_KEY] = False
    if REGISTER_REGISTRANT_KEY not in st.session_state:
        st.session_state[REGISTER_REGISTRANT_KEY] = None


def reset_registration() -> None:
    """Forget the last submission so a fresh form is shown."""
    st.session_state[REGISTER_SUBMITTED_KEY] = False
    st.session_state[REGISTER_REGISTRANT_KEY] = None


def _on_pdf_downloaded() -> None:
    st.toast(DOWNLOADED_MESSAGE, icon="✅")


def _current_registrant():
    row = st.session_state.get(REGISTER_REGISTRANT_KEY)
    return Registrant.from_row(row) if row else None


def _render_success_view(registrant: Registrant) -> None:
    settings = get_settings()

    st.markdown(
        card(
            html_block(
                f"""
                <div class="hr-center">
                  <div class="hr-check">&#10004;</div>
                  <h2>Registration Successful!</h2>
                  <p>Thank you, {text(registrant.first_name)}! Your registration has been recorded
                  and a notification has been sent. Please download your form and upload it to
                  complete the process.</p>
                </div>
                """
            )
        ),
        unsafe_allow_html=True,
    )

    exported = export_registration_pdf(registrant, settings.foundation_name)
    if exported:
        file_name, pdf_bytes = exported
        st.download_button(
            "⬇️ Download Registration Form",
            data=pdf_bytes,
            file_name=file_name,
            mime="application/pdf",
            type="primary",
            use_container_width=True,
            key=f"download_form_{registrant.id}",
            on_click=_on_pdf_downloaded,
        )

    if st.button("Upload Form →", use_container_width=True, key="register_to_upload"):
        navigate("upload", registrant.id)
        st.rerun()

    if st.button("Register someone else", use_container_width=True, key="register_another"):
        reset_registration()
        st.rerun()


def _render_form() -> None:
    st.markdown(
        html_block(
            """
            <div class="hr-center">
              <h2>Registration Form</h2>
              <p class="hr-muted">Fill in your details to stand a chance to be among the Top 10 Favorites.</p>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )

    with st.form("registration_form", clear_on_submit=False):
        first_col, middle_col = st.columns(2, gap="small")
        with first_col:
            first_name = st.text_input("First Name *", placeholder="FirstName")
        with middle_col:
            middle_name = st.text_input("Middle Name", placeholder="MiddleName (Optional)")

        last_name = st.text_input("Last Name *", placeholder="LastName")
        email = st.text_input("Email *", placeholder="Your email")

        age_col, country_col = st.columns(2, gap="small")
        with age_col:
            age = st.number_input("Age *", min_value=1, max_value=150, value=None, step=1, placeholder="Your age")
        with country_col:
            country = st.text_input("Country *", placeholder="Your country")

        address = st.text_input("Address *", placeholder="Your address")
        phone = st.text_input("Phone Number *", placeholder="Your phone number")
        gender = st.selectbox(
            "Gender",
            GENDER_OPTIONS,
            index=0,
            format_func=lambda option: option or "Prefer not to say",
        )

        submit = st.form_submit_button("Submit Registration", type="primary", use_container_width=True)

    if not submit:
        return

    form = {
        "firstName": first_name,
        "middleName": middle_name,
        "lastName": last_name,
        "email": email,
        "age": "" if age is None else int(age),
        "country": country,
        "address": address,
        "phone": phone,
        "gender": gender,
    }

    with st.spinner("Submitting..."):
        success, message, registrant = submit_registration(form, get_functions())

    if not success:
        st.error(f"❌ {message}")
        return

    st.session_state[REGISTER_REGISTRANT_KEY] = registrant.to_row()
    st.session_state[REGISTER_SUBMITTED_KEY] = True
    st.toast(message, icon="✅")
    st.rerun()


def render_register_page() -> None:
    """Render the registration page or, after a submission, the success view."""
    _ensure_register_state()

    registrant = _current_registrant()
    if st.session_state[REGISTER_SUBMITTED_KEY] and registrant is not None:
        _render_success_view(registrant)
        return

    _render_form()
