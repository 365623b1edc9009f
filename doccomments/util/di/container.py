"""Production container."""

from typing import Optional

from dishka import AsyncContainer, make_async_container

from doccomments.config import Settings
from doccomments.util.di import PROVIDERS, get_provider
from doccomments.util.logging import setup_logging
from doccomments.util.observability import configure_logfire


def create_container(settings: Optional[Settings] = None) -> AsyncContainer:
    """Container with every production provider.

    Open one request scope per inbound operation; the scope owns the
    database transaction.

        container = create_container()
        async with container() as request:
            use_case = await request.get(VoteUseCase)

    Args:
        settings: Defaults to Settings() read from the environment and .env
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)

    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, context={Settings: settings})
