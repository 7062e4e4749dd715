"""
Chain Game Errors

Exceptions raised while setting up a chain game. Problems during play are
never raised; they are reported as rejected actions instead.
"""


class ConfigurationError(Exception):
    """Raised when a game cannot be set up with the requested options."""
