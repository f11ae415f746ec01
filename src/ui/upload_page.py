"""Upload page for the signed registration PDF."""
import logging
from typing import Optional

import streamlit as st

from src.services.backend import get_functions, get_registrant_repository, uses_email_relay
from src.services.upload_service import upload_registration_form
from src.ui.html_utils import card, html_block, text
from src.ui.layout import navigate
from src.utils.exceptions import StorageError
from src.utils.validation import validate_pdf_upload

logger = logging.getLogger(__name__)

UPLOADED_KEY = "upload_completed_id"


def _description(registrant) -> str:
    if registrant is None:
        return "Upload your downloaded registration form to complete the process."
    return f"Upload the downloaded PDF for {registrant.first_name} {registrant.last_name}"


def _render_complete_view() -> None:
    st.markdown(
        card(
            html_block(
                """
                <div class="hr-center">
                  <div class="hr-check">&#10004;</div>
                  <h2>Upload Complete!</h2>
                  <p>Your registration form has been uploaded. You can now view all registered people.</p>
                </div>
                """
            )
        ),
        unsafe_allow_html=True,
    )
    if st.button("View Registered People", type="primary", use_container_width=True, key="upload_to_registered"):
        st.session_state.pop(UPLOADED_KEY, None)
        navigate("registered")
        st.rerun()


def render_upload_page(registrant_id: Optional[str]) -> None:
    """Render the upload form for `registrant_id` (from the `id` query parameter)."""
    if registrant_id and st.session_state.get(UPLOADED_KEY) == registrant_id:
        _render_complete_view()
        return

    repository = get_registrant_repository()
    registrant = None
    if registrant_id:
        try:
            registrant = repository.get(registrant_id)
        except StorageError:
            logger.exception("Failed to load registrant %s", registrant_id)

    st.markdown(
        html_block(
            f"""
            <div class="hr-center">
              <h2>Upload Registration Form</h2>
              <p class="hr-muted">{text(_description(registrant))}</p>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )

    uploaded = st.file_uploader(
        "Click to select PDF",
        type=["pdf"],
        accept_multiple_files=False,
        key=f"pdf_upload_{registrant_id}",
        help="PDF files only",
    )

    file_ok = False
    if uploaded is not None:
        file_ok, error_msg = validate_pdf_upload(uploaded.name, uploaded.type)
        if file_ok:
            st.caption(f"📄 {uploaded.name} · click to change file")
        else:
            st.error(f"❌ {error_msg}")

    if st.button("Upload Form", type="primary", use_container_width=True, disabled=not file_ok, key="upload_submit"):
        with st.spinner("Uploading..."):
            success, message = upload_registration_form(
                registrant_id,
                uploaded.name,
                uploaded.type,
                uploaded.getvalue(),
                repository,
                functions=get_functions() if uses_email_relay() else None,
            )

        if success:
            st.session_state[UPLOADED_KEY] = registrant_id
            st.toast(message, icon="✅")
            st.rerun()
        else:
            st.error(f"❌ {message}")
