# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Delivery of contact-form submissions.

The contact endpoint only knows the :class:`Mailer` interface; the concrete
mailer is chosen once at start-up (``build_mailer``) and attached to the app,
the same way the storage backend is.

* :class:`LogMailer`  – default.  Writes the submission to the log.
* :class:`SmtpMailer` – used when SMTP_HOST is configured.

Delivery is attempted exactly once.  Failures propagate to the endpoint,
which answers 500 and leaves re-submission to the visitor.
"""

import abc
import smtplib
from email.message import EmailMessage

from fastapi import Request

from contact.schemas import ContactMessage
from core.logger import logger


class Mailer(abc.ABC):
    """Interface: deliver one validated contact-form submission."""

    @abc.abstractmethod
    def send(self, message: ContactMessage) -> None:
        ...


class LogMailer(Mailer):

    def send(self, message: ContactMessage) -> None:
        logger.info(
            "Contact form submission | name=%s email=%s subject=%s length=%d",
            message.name,
            message.email,
            message.subject or "(none)",
            len(message.message or ""),
        )


class SmtpMailer(Mailer):

    def __init__(
        self,
        host: str,
        port: int,
        recipient: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.recipient = recipient
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def build_email(self, message: ContactMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.username or self.recipient
        email["To"] = self.recipient
        # Replies go straight to the visitor
        email["Reply-To"] = message.email
        email["Subject"] = f"Portfolio Contact: {message.subject or 'New message'}"
        email.set_content(
            f"Name: {message.name}\n"
            f"Email: {message.email}\n\n"
            f"Message:\n{message.message}\n"
        )
        return email

    def send(self, message: ContactMessage) -> None:
        email = self.build_email(message)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password)
            smtp.send_message(email)
        logger.info("Contact form submission from %s delivered to %s", message.email, self.recipient)


def build_mailer(app_settings) -> Mailer:
    """SMTP delivery when SMTP_HOST is set, log-only otherwise."""
    if app_settings.smtp_host:
        return SmtpMailer(
            host=app_settings.smtp_host,
            port=app_settings.smtp_port,
            recipient=app_settings.contact_recipient or app_settings.smtp_username,
            username=app_settings.smtp_username,
            password=app_settings.smtp_password,
            use_tls=app_settings.smtp_use_tls,
        )
    return LogMailer()


def get_mailer(request: Request) -> Mailer:
    """FastAPI dependency.  Use with Depends(get_mailer)."""
    return request.app.state.mailer
