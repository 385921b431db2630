"""
Handles reading of WAV containers from a path or binary stream into a
parsed header and payload.
"""

from typing import BinaryIO, Optional, Type
from types import TracebackType

import numpy as np

from pymakewav.core.samples import payload_to_samples
from pymakewav.wav.codec import decode
from pymakewav.wav.header import WavHeader


class WavReaderError(Exception):
    """Custom exception for WAV reader I/O errors."""

    pass


class WavReader:
    """
    Reads a whole WAV container and exposes its header and payload.
    Codec errors (TruncatedHeaderError, UnknownTagError, ...) propagate
    unchanged; only I/O failures are wrapped in WavReaderError.
    """

    def __init__(self, filepath_or_stream: str | BinaryIO, strict: bool = False):
        """
        Initializes the WAV reader.

        Args:
            filepath_or_stream: Path to the WAV file or an already open binary stream.
            strict: Reject headers with inconsistent derived fields.
        """
        if isinstance(filepath_or_stream, str):
            try:
                self.stream: BinaryIO = open(filepath_or_stream, "rb")
            except IOError as e:
                raise WavReaderError(
                    f"Failed to open WAV file: {filepath_or_stream}"
                ) from e
            self._close_on_exit = True
        else:
            self.stream: BinaryIO = filepath_or_stream
            self._close_on_exit = False

        self.header: Optional[WavHeader] = None
        self.payload: bytes = b""
        try:
            self._read_container(strict)
        except BaseException:
            self.close()
            raise

    def _read_container(self, strict: bool):
        """Reads the stream from its start and decodes it."""
        try:
            self.stream.seek(0)
            data = self.stream.read()
        except IOError as e:
            raise WavReaderError("Failed to read WAV container.") from e
        self.header, self.payload = decode(data, strict=strict)

    def get_header(self) -> WavHeader:
        """Returns the parsed header."""
        if self.header is None:
            raise WavReaderError("Header not loaded.")
        return self.header

    def samples(self) -> np.ndarray:
        """
        Returns the payload as a (frames, channels) sample array.
        """
        header = self.get_header()
        return payload_to_samples(
            self.payload, header.channel_count, header.bits_per_sample
        )

    def close(self):
        """Closes the stream if it was opened by this reader."""
        if self._close_on_exit and self.stream:
            if not self.stream.closed:
                self.stream.close()

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> Optional[bool]:
        self.close()
        return False  # Do not suppress exceptions
