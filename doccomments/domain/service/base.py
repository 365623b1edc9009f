"""Common base of the comment engine's domain services."""


class Service:
    """Marker base for domain services.

    A service is built per request around the repositories it needs and
    keeps no state of its own between calls, so the viewer and visibility
    of a read always travel as arguments.
    """
