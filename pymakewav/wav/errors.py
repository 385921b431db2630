"""
Exception hierarchy for the WAV container codec.
All codec failures are terminal validation errors on the given input.
"""


class WavError(ValueError):
    """Base class for container encode/decode errors."""

    pass


class InvalidParametersError(WavError):
    """Audio parameters are out of range or give a fractional block align."""

    pass


class PayloadTooLargeError(WavError):
    """Payload length does not fit the 32-bit size fields."""

    pass


class TruncatedHeaderError(WavError):
    """Fewer than 44 bytes were available for the header."""

    pass


class UnknownTagError(WavError):
    """One of the RIFF, WAVE, fmt or data tags is wrong."""

    pass


class UnsupportedFormatError(WavError):
    """The header declares an audio format other than linear PCM."""

    pass


class TruncatedPayloadError(WavError):
    """Fewer than data_size bytes follow the header."""

    pass


class HeaderMismatchError(WavError):
    """A stored derived field disagrees with the other header fields."""

    pass
