"""Tests for POST /send-registration-email."""
from src.functions.handlers import MISSING_UPLOAD_ERROR, NOT_PDF_ERROR, SEND_FAILED_ERROR
from src.utils.exceptions import MailDeliveryError

PDF_BYTES = b"%PDF-1.4\n%fake\n"


def post_form(client, file=("form.pdf", PDF_BYTES, "application/pdf"), **data):
    data.setdefault("registrantName", "Jane Doe")
    files = {"file": file} if file else None
    return client.post("/send-registration-email", data=data, files=files)


class TestSendRegistrationEmail:
    """Tests for the email relay endpoint."""

    def test_relays_pdf(self, client, mailer):
        response = post_form(client, registrantId="r-1")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        kwargs = mailer.send.call_args.kwargs
        assert kwargs["subject"] == "Registration form uploaded: Jane Doe"
        assert "Registration ID: r-1" in kwargs["body_text"]
        assert kwargs["attachments"] == [("form.pdf", "application/pdf", PDF_BYTES)]

    def test_missing_file(self, client, mailer):
        response = post_form(client, file=None)

        assert response.status_code == 400
        assert response.json() == {"error": MISSING_UPLOAD_ERROR}
        mailer.send.assert_not_called()

    def test_missing_name(self, client, mailer):
        response = post_form(client, registrantName="  ")

        assert response.status_code == 400
        mailer.send.assert_not_called()

    def test_non_pdf_rejected(self, client, mailer):
        response = post_form(client, file=("photo.png", b"\x89PNG", "image/png"))

        assert response.status_code == 400
        assert response.json() == {"error": NOT_PDF_ERROR}
        mailer.send.assert_not_called()

    def test_delivery_failure(self, client, mailer):
        mailer.send.side_effect = MailDeliveryError("smtp down")

        response = post_form(client)

        assert response.status_code == 502
        assert response.json() == {"error": SEND_FAILED_ERROR}
