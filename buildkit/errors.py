"""Exceptions raised by the map and archive codecs."""


class DecodeError(ValueError):
    """Base class for failures while decoding a map or archive."""


class SignatureError(DecodeError):
    """Archive does not start with the GRP signature."""


class VersionError(DecodeError):
    """Map version is outside the supported range."""


class TruncatedInputError(DecodeError):
    """Declared counts need more bytes than the buffer holds."""


class OutOfBoundsError(DecodeError):
    """Archive entry range lies outside the archive buffer."""


class BufferOverflowError(ValueError):
    """Write past the end of a pre-sized output buffer."""
