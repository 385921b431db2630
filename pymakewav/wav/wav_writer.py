"""
Handles writing of WAV containers: a canonical header followed by the
payload, to a path or binary stream.
"""

from typing import BinaryIO, Type, Optional
from types import TracebackType

from pymakewav.wav.codec import encode
from pymakewav.wav.header import AudioParams, WavHeader


class WavWriterError(Exception):
    """Custom exception for WAV writer I/O errors."""

    pass


class WavWriter:
    """
    Writes one WAV container. Parameters are validated on construction and
    the container is encoded in full before a path is opened, so a failed
    encode leaves no output file behind.
    """

    def __init__(self, filepath_or_stream: str | BinaryIO, params: AudioParams):
        """
        Initializes the WAV writer.

        Args:
            filepath_or_stream: Path to the WAV file to create/overwrite or an
                                already open binary stream for writing.
            params: Audio parameters for the header.
        """
        params.validate()
        self.params = params

        if isinstance(filepath_or_stream, str):
            self.filepath: Optional[str] = filepath_or_stream
            self.stream: Optional[BinaryIO] = None
            self._close_on_exit = True
        else:
            self.filepath = None
            self.stream = filepath_or_stream
            self._close_on_exit = False

        self.header: Optional[WavHeader] = None

    def _open(self) -> BinaryIO:
        if self.stream is None:
            try:
                self.stream = open(self.filepath, "wb")
            except IOError as e:
                raise WavWriterError(
                    f"Failed to open WAV file for writing: {self.filepath}"
                ) from e
        return self.stream

    def write(self, payload: bytes) -> WavHeader:
        """
        Encodes the payload into a container and writes it out.

        Returns:
            The header that was written.
        """
        if self.header is not None:
            raise WavWriterError("Container already written.")

        container = encode(self.params, payload)
        stream = self._open()
        try:
            stream.write(container)
            stream.flush()
        except IOError as e:
            raise WavWriterError("Failed to write WAV container.") from e

        self.header = WavHeader.for_payload(self.params, len(payload))
        return self.header

    def close(self):
        """Closes the stream if it was opened by this writer."""
        if self._close_on_exit and self.stream and not self.stream.closed:
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
        return False
