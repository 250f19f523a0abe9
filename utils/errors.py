"""
Exceptions raised by the stream and dictionary decoders.
"""


class EmptySource(ValueError):
    """The chunk source produced no body at all."""
    pass


class InvalidDictionaryKey(ValueError):
    """Dictionary key does not match ``<length><first letter>``."""

    def __init__(self, key):
        super().__init__(f"Invalid dictionary key: {key!r}")
        self.key = key
