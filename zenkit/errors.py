"""Exceptions raised by the media codecs."""


class DecodeError(ValueError):
    """Raised when encoded media data is malformed or truncated."""