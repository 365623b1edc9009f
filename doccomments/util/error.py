"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base error of the util layer."""


class ConfigurationError(UtilError):
    """Settings are inconsistent, e.g. e-mail enabled without a recipient."""
