"""
Container codec: wraps raw bytes in a PCM WAV container and parses such a
container back into its header and payload.

Both functions are pure. They raise a WavError subclass on invalid input and
never return partial output.
"""

from typing import Tuple

from pymakewav.common.constants import HEADER_SIZE, MAX_PAYLOAD_SIZE
from pymakewav.wav.errors import PayloadTooLargeError, TruncatedPayloadError
from pymakewav.wav.header import AudioParams, WavHeader


def encode(params: AudioParams, payload: bytes) -> bytes:
    """
    Serializes a canonical 44-byte header followed by the payload.

    Args:
        params: Channel count, sample rate and bit depth of the container.
        payload: Bytes stored verbatim as the data chunk.

    Returns:
        Exactly 44 + len(payload) bytes.

    Raises:
        TypeError: payload is not bytes-like.
        InvalidParametersError: params do not fit the header fields.
        PayloadTooLargeError: payload does not fit the 32-bit size fields.
    """
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"Payload must be a bytes-like object, got {type(payload).__name__}"
        )
    params.validate()

    data = bytes(payload)
    if len(data) > MAX_PAYLOAD_SIZE:
        raise PayloadTooLargeError(
            f"Payload of {len(data)} bytes exceeds the {MAX_PAYLOAD_SIZE} byte limit"
        )

    header = WavHeader.for_payload(params, len(data))
    return header.pack() + data


def decode(data: bytes, strict: bool = False) -> Tuple[WavHeader, bytes]:
    """
    Parses a container into its header and exactly data_size payload bytes.
    Bytes after the payload are ignored.

    Args:
        data: The container bytes.
        strict: Also reject headers whose riff size, fmt chunk size, byte
                rate or block align disagree with the other fields.

    Raises:
        TruncatedHeaderError, UnknownTagError, UnsupportedFormatError,
        TruncatedPayloadError, and HeaderMismatchError when strict.
    """
    header = WavHeader.unpack(data)
    if strict:
        header.check_consistency()

    available = len(data) - HEADER_SIZE
    if available < header.data_size:
        raise TruncatedPayloadError(
            f"Header declares {header.data_size} payload bytes, only {available} available"
        )

    payload = bytes(data[HEADER_SIZE : HEADER_SIZE + header.data_size])
    return header, payload
