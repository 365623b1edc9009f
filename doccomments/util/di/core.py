"""Configuration providers."""

from dishka import Scope, from_context, provide

from doccomments.config import CommentSettings, EmailSettings, Settings
from doccomments.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Exposes the Settings handed to the container and its sections.

    Settings are read once by whoever builds the container, which also
    configures logging from them before any provider runs.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email
