"""Base exception classes for the G.711 codec."""


class G711Error(Exception):
    """Base class for all errors raised by the G.711 codec.

    Callers that only care whether a codec call succeeded can catch this
    single type; the subclasses carry the details.
    """
