"""SMTP relay for registration forms."""
import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Iterable, Optional, Tuple

from src.utils.exceptions import MailDeliveryError

logger = logging.getLogger(__name__)

# (file name, MIME type, content)
Attachment = Tuple[str, str, bytes]


class Mailer:
    def __init__(
        self,
        enabled: bool,
        host: str,
        port: int,
        user: Optional[str] = None,
        password: Optional[str] = None,
        use_ssl: bool = False,
        use_starttls: bool = True,
        from_name: str = "",
        from_addr: str = "",
        to_addr: str = "",
    ):
        self.enabled = enabled
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.use_ssl = use_ssl
        self.use_starttls = use_starttls
        self.from_name = from_name
        self.from_addr = from_addr
        self.to_addr = to_addr

    @classmethod
    def from_settings(cls, settings) -> "Mailer":
        return cls(
            enabled=settings.email_enabled,
            host=settings.smtp_host,
            port=settings.smtp_port,
            user=settings.smtp_user,
            password=settings.smtp_pass,
            use_ssl=settings.smtp_ssl,
            use_starttls=settings.smtp_starttls,
            from_name=settings.email_from_name,
            from_addr=settings.email_from_addr,
            to_addr=settings.email_to_addr,
        )

    def build_message(
        self,
        subject: str,
        body_text: str,
        attachments: Iterable[Attachment] = (),
        to_addr: Optional[str] = None,
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = f"{self.from_name} <{self.from_addr}>" if self.from_name else self.from_addr
        msg["To"] = to_addr or self.to_addr
        msg["Subject"] = subject
        msg.set_content(body_text)

        for file_name, mime_type, content in attachments:
            maintype, _, subtype = mime_type.partition("/")
            msg.add_attachment(
                content,
                maintype=maintype or "application",
                subtype=subtype or "octet-stream",
                filename=file_name,
            )
        return msg

    def send(
        self,
        subject: str,
        body_text: str,
        attachments: Iterable[Attachment] = (),
        to_addr: Optional[str] = None,
    ) -> None:
        """
        Send one message, raising MailDeliveryError on SMTP or network failure.

        A disabled mailer only logs the subject.
        """
        if not self.enabled:
            logger.info("Email disabled, not sending: %s", subject)
            return

        msg = self.build_message(subject, body_text, attachments, to_addr)

        try:
            if self.use_ssl:
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(self.host, self.port, context=context, timeout=10) as smtp:
                    if self.user:
                        smtp.login(self.user, self.password or "")
                    smtp.send_message(msg)
                return

            with smtplib.SMTP(self.host, self.port, timeout=10) as smtp:
                if self.use_starttls:
                    smtp.starttls(context=ssl.create_default_context())
                if self.user:
                    smtp.login(self.user, self.password or "")
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(f"Failed to send '{subject}': {e}") from e
