"""Domain layer errors.

Races on votes, tags and readings are settled inside the repositories and
never show up here.
"""


class DomainError(Exception):
    """Base domain error."""


class ValidationError(DomainError):
    """Malformed input: a target descriptor, a vote value, a tag name, a move."""


class NotFoundError(DomainError):
    """An id that does not resolve in the domain under the current view."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """The viewer may not act on this comment."""

    def __init__(self, action: str, comment_id: str, user_id: str):
        self.action = action
        self.comment_id = comment_id
        self.user_id = user_id
        super().__init__(f"User {user_id} may not {action} comment {comment_id}")


class AuthenticationRequiredError(DomainError):
    """Anonymous viewer attempted something that needs a login."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Login required to {action}")
