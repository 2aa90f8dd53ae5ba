"""SMTP mail transport."""

from __future__ import annotations

import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from .abstract_mailer import AbstractMailer, MailDeliveryError


class SmtpMailer(AbstractMailer):
    """Send mail through an SMTP relay using the configured credentials."""

    def __init__(
        self,
        host: str,
        port: int,
        *,
        username: str | None = None,
        password: str | None = None,
        sender_name: str | None = None,
        use_tls: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender_name = sender_name
        self.use_tls = use_tls

    @classmethod
    def from_config(cls, config) -> "SmtpMailer":
        return cls(
            config.get("MAIL_HOST", "localhost"),
            int(config.get("MAIL_PORT", 587)),
            username=config.get("MAIL_USERNAME"),
            password=config.get("MAIL_PASSWORD"),
            sender_name=config.get("APP_NAME"),
            use_tls=config.get("MAIL_USE_TLS", True),
        )

    def _build_message(self, sender: str, recipient: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.sender_name or "", sender))
        message["To"] = recipient
        message["Subject"] = subject
        # utf-8 plain text is sent base64 encoded.
        message.set_content(body, charset="utf-8", cte="base64")
        return message

    def send(
        self,
        sender: str,
        recipient: str,
        subject: str,
        body: str,
        *,
        timeout: float | None = None,
    ) -> None:
        message = self._build_message(sender, recipient, subject, body)
        options = {} if timeout is None else {"timeout": timeout}
        try:
            with smtplib.SMTP(self.host, self.port, **options) as server:
                if self.use_tls:
                    server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"Could not deliver mail to {recipient}: {exc}") from exc
