"""Errors of the outbound adapters."""


class AdapterError(Exception):
    """Base adapter error."""


class MailDeliveryError(AdapterError):
    """The SMTP server refused or could not be reached."""
