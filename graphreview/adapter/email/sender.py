"""Transactional email delivery.

Emails are handed to an HTTP email service as JSON
``{from, to, subject, html}``.
"""

import httpx
import logfire

from graphreview.config import NotificationSettings
from graphreview.domain.error import NotificationDispatchError
from graphreview.domain.service.notification_service import EmailSender


class RealEmailSender(EmailSender):
    """Email sender posting to the configured email service."""

    def __init__(self, settings: NotificationSettings) -> None:
        """Initialize email sender.

        Args:
            settings: Notification settings with service URL, key and sender
        """
        self.api_url = settings.email_api_url
        self.api_key = settings.email_api_key
        self.sender_address = settings.sender_address

    async def send(self, to: str, subject: str, html: str) -> None:
        """Deliver one email.

        Raises:
            NotificationDispatchError: If the service rejects the email or
                cannot be reached
        """
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "from": self.sender_address,
            "to": to,
            "subject": subject,
            "html": html,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers=headers,
                    timeout=30.0,
                )

                if response.status_code >= 400:
                    logfire.error(
                        "Email service rejected message",
                        status_code=response.status_code,
                        error=response.text,
                        recipient=to,
                    )
                    raise NotificationDispatchError(
                        f"Email service returned {response.status_code}"
                    )

        except httpx.HTTPError as e:
            logfire.error("Email service HTTP error", error=str(e), recipient=to)
            raise NotificationDispatchError(f"HTTP error sending email: {e}")

        logfire.info("Email sent", recipient=to, subject=subject)


class MockEmailSender(EmailSender):
    """Mock email sender for testing.

    Records every email instead of delivering it. Addresses listed in
    ``failing_recipients`` raise like an unreachable service would.
    """

    def __init__(self) -> None:
        self.sent: list[dict[str, str]] = []
        self.failing_recipients: set[str] = set()

    async def send(self, to: str, subject: str, html: str) -> None:
        """Record the email."""
        if to in self.failing_recipients:
            raise NotificationDispatchError(f"Mock delivery failure for {to}")
        self.sent.append({"to": to, "subject": subject, "html": html})
