"""Infrastructure providers.

Production flavours are imported here so get_provider finds them among the
subclasses of each component base.
"""

from .mailer import MailerProvider, ProdMailerProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "MailerProvider",
    "PersistenceProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
]
