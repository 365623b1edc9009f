"""Mailer infrastructure providers."""

from dishka import Scope, provide

from doccomments.adapter.mailer import LogMailer, SmtpMailer
from doccomments.config import EmailSettings
from doccomments.domain.service import Mailer
from doccomments.util.di.base import ProviderBase
from doccomments.util.error import ConfigurationError


class MailerProvider(ProviderBase):
    """Mailer component base."""

    __mock_component__ = "mailer"


class ProdMailerProvider(MailerProvider):
    """Production mailer provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mailer(self, email_settings: EmailSettings) -> Mailer:
        """Provide notification mailer.

        Returns:
            SMTP mailer when e-mail is enabled, otherwise a mailer that only logs

        Raises:
            ConfigurationError: If e-mail is enabled without a mailing list
        """
        if not email_settings.enabled:
            return LogMailer()
        if not email_settings.mailing_list:
            raise ConfigurationError("EMAIL__MAILING_LIST must be set when e-mail is enabled")
        return SmtpMailer(settings=email_settings)
