"""
Exceptions raised by the charkit core library.

Every error derives from `CharSetError` so callers can handle the whole
family at once, while still matching the builtin exception they resemble.
"""


class CharSetError(Exception):
    """Base class for character set errors."""

    pass


class InvalidInputError(CharSetError, ValueError):
    """Raised when a constructor input cannot be normalized to a character token."""

    pass


class EmptySetError(CharSetError, IndexError):
    """Raised when sampling from a character set with no characters."""

    pass
