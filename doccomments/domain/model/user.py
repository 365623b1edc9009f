"""User entity.

Users are owned by the authentication system; the comment system only
reads them to show authors and rankings.
"""

from doccomments.domain.model.common import DomainModel
from doccomments.domain.value import UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    username: str
    email: str = ""
    moderator: bool = False


class Viewer(DomainModel):
    """Identity and role of the user issuing a request."""

    user_id: UserId
    moderator: bool = False
