"""Email infrastructure providers."""

from dishka import Scope, provide

from graphreview.adapter.email import RealEmailSender
from graphreview.config import NotificationSettings
from graphreview.domain.service import EmailSender
from graphreview.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, settings: NotificationSettings) -> EmailSender:
        """Provide email sender posting to the configured email service.

        Raises:
            ValueError: If the email service URL is not configured
        """
        if not settings.email_api_url:
            raise ValueError("Email service URL must be configured")

        return RealEmailSender(settings)
