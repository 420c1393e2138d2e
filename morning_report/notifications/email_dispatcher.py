"""Email delivery of the morning report via Gmail SMTP.

Requires a Gmail account with an App Password. Delivery is skipped with a
warning when credentials or recipients are missing; once configured, any
failure while connecting or sending is raised as ReportDeliveryError.
"""

import smtplib
from datetime import datetime
from email.mime.text import MIMEText
from typing import Optional, Sequence

from morning_report.core.config import MailCredentials
from morning_report.core.errors import ReportDeliveryError
from morning_report.core.logger import logger

SUBJECT_PREFIX = "🌅 Morning Market Report"


class EmailDispatcher:
    """Send the rendered report as an HTML email over SMTP + STARTTLS.

    Args:
        credentials: SMTP login; ``None`` disables sending.
        recipients: Addresses placed on the ``To`` header.
        smtp_host: Outbound relay host.
        smtp_port: Submission port.
        timeout: Socket timeout in seconds.
    """

    def __init__(
        self,
        credentials: Optional[MailCredentials],
        recipients: Sequence[str],
        smtp_host: str = "smtp.gmail.com",
        smtp_port: int = 587,
        timeout: float = 30.0,
    ) -> None:
        self.credentials = credentials
        self.recipients = [r for r in recipients if r]
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.timeout = timeout

        if not self.enabled:
            logger.warning("Email credentials not fully configured. Email sending will be skipped.")

    @property
    def enabled(self) -> bool:
        return bool(self.credentials and self.recipients)

    def send(self, html: str, sent_at: Optional[datetime] = None) -> bool:
        """Email ``html`` to every configured recipient.

        Args:
            html: Rendered report, sent as the only (HTML) body part.
            sent_at: Date shown in the subject (defaults to now).

        Returns:
            True if sent, False if skipped because email is not configured.

        Raises:
            ReportDeliveryError: If connecting, authenticating or sending fails.
        """
        if not self.enabled:
            logger.warning("Email not configured, skipping email send")
            return False

        msg = self.build_message(html, sent_at or datetime.now())

        logger.info("Sending email report...")
        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as server:
                server.ehlo()
                server.starttls()
                server.ehlo()
                server.login(self.credentials.username, self.credentials.password)
                server.send_message(msg)
        except Exception as exc:
            logger.error(f"Failed to send email report: {type(exc).__name__}: {exc}")
            raise ReportDeliveryError(
                "Email sending failed",
                details={"smtp_host": self.smtp_host, "recipients": len(self.recipients)},
            ) from exc

        logger.info(f"Email report sent successfully to {len(self.recipients)} recipients")
        return True

    def build_message(self, html: str, sent_at: datetime) -> MIMEText:
        """Build the HTML message with subject, sender and recipients set."""
        msg = MIMEText(html, "html", "utf-8")
        msg["Subject"] = f"{SUBJECT_PREFIX} - {sent_at:%b %d, %Y}"
        msg["From"] = self.credentials.username
        msg["To"] = ", ".join(self.recipients)
        return msg
