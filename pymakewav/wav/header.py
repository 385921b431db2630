"""
Handles the canonical 44-byte RIFF/WAVE header: the audio parameter record,
derived field computation, and packing to and from the wire layout.
"""

import struct
from dataclasses import dataclass
from typing import BinaryIO, List

from pymakewav.common.constants import (
    DATA_TAG,
    FMT_TAG,
    HEADER_SIZE,
    MAX_U16,
    MAX_U32,
    PCM_FMT_CHUNK_SIZE,
    RIFF_SIZE_OVERHEAD,
    RIFF_TAG,
    WAVE_FORMAT_PCM,
    WAVE_TAG,
)
from pymakewav.common.utils import format_size
from pymakewav.wav.errors import (
    HeaderMismatchError,
    InvalidParametersError,
    TruncatedHeaderError,
    UnknownTagError,
    UnsupportedFormatError,
)


def _check_int_range(name: str, value: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParametersError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if not 1 <= value <= maximum:
        raise InvalidParametersError(
            f"{name} must be between 1 and {maximum}, got {value}"
        )


@dataclass(frozen=True)
class AudioParams:
    """
    Caller supplied audio parameters. Byte rate and block align are always
    derived from these three values.
    """

    channel_count: int
    sample_rate: int
    bits_per_sample: int

    @property
    def block_align(self) -> int:
        """Bytes per sample frame across all channels."""
        return self.bits_per_sample * self.channel_count // 8

    @property
    def byte_rate(self) -> int:
        """Bytes of sample data per second of playback."""
        return self.sample_rate * self.bits_per_sample * self.channel_count // 8

    def validate(self) -> None:
        """
        Raises InvalidParametersError unless every field fits its header
        width and the block align is a whole number of bytes.
        """
        _check_int_range("Channel count", self.channel_count, MAX_U16)
        _check_int_range("Sample rate", self.sample_rate, MAX_U32)
        _check_int_range("Bits per sample", self.bits_per_sample, MAX_U16)

        frame_bits = self.bits_per_sample * self.channel_count
        if frame_bits % 8 != 0:
            raise InvalidParametersError(
                f"Block align must be a whole number of bytes, got "
                f"{self.bits_per_sample} bits x {self.channel_count} channels = {frame_bits} bits"
            )
        if self.block_align > MAX_U16:
            raise InvalidParametersError(
                f"Block align {self.block_align} does not fit in 16 bits"
            )
        if self.byte_rate > MAX_U32:
            raise InvalidParametersError(
                f"Byte rate {self.byte_rate} does not fit in 32 bits"
            )


@dataclass(frozen=True)
class WavHeader:
    """
    Represents the fixed RIFF/WAVE header, fields in wire order.
    Instances are immutable; build new ones with for_payload().
    """

    STRUCT_FORMAT = "<4sI4s4sIHHIIHH4sI"

    RIFF_TAG_OFFSET = 0
    RIFF_SIZE_OFFSET = 4
    FORMAT_TAG_OFFSET = 8
    FMT_CHUNK_ID_OFFSET = 12
    FMT_CHUNK_SIZE_OFFSET = 16
    AUDIO_FORMAT_OFFSET = 20
    CHANNEL_COUNT_OFFSET = 22
    SAMPLE_RATE_OFFSET = 24
    BYTE_RATE_OFFSET = 28
    BLOCK_ALIGN_OFFSET = 32
    BITS_PER_SAMPLE_OFFSET = 34
    DATA_CHUNK_ID_OFFSET = 36
    DATA_SIZE_OFFSET = 40

    riff_tag: bytes
    riff_size: int
    format_tag: bytes
    fmt_chunk_id: bytes
    fmt_chunk_size: int
    audio_format: int
    channel_count: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_chunk_id: bytes
    data_size: int

    @classmethod
    def for_payload(cls, params: AudioParams, data_size: int) -> "WavHeader":
        """
        Builds a PCM header for a payload of data_size bytes, computing
        byte rate, block align and riff size from the parameters.
        """
        return cls(
            riff_tag=RIFF_TAG,
            riff_size=data_size + RIFF_SIZE_OVERHEAD,
            format_tag=WAVE_TAG,
            fmt_chunk_id=FMT_TAG,
            fmt_chunk_size=PCM_FMT_CHUNK_SIZE,
            audio_format=WAVE_FORMAT_PCM,
            channel_count=params.channel_count,
            sample_rate=params.sample_rate,
            byte_rate=params.byte_rate,
            block_align=params.block_align,
            bits_per_sample=params.bits_per_sample,
            data_chunk_id=DATA_TAG,
            data_size=data_size,
        )

    @property
    def params(self) -> AudioParams:
        return AudioParams(
            channel_count=self.channel_count,
            sample_rate=self.sample_rate,
            bits_per_sample=self.bits_per_sample,
        )

    def pack(self) -> bytes:
        """
        Packs the header into its 44-byte little-endian wire form.
        """
        return struct.pack(
            self.STRUCT_FORMAT,
            self.riff_tag,
            self.riff_size,
            self.format_tag,
            self.fmt_chunk_id,
            self.fmt_chunk_size,
            self.audio_format,
            self.channel_count,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
            self.data_chunk_id,
            self.data_size,
        )

    @classmethod
    def unpack(cls, header_bytes: bytes) -> "WavHeader":
        """
        Unpacks the first 44 bytes of header_bytes into a WavHeader.

        Raises:
            TruncatedHeaderError: fewer than 44 bytes are available.
            UnknownTagError: a chunk tag is not the expected literal.
            UnsupportedFormatError: the audio format is not linear PCM.
        """
        if len(header_bytes) < HEADER_SIZE:
            raise TruncatedHeaderError(
                f"Header needs {HEADER_SIZE} bytes, got {len(header_bytes)}"
            )

        header = cls(*struct.unpack_from(cls.STRUCT_FORMAT, header_bytes, 0))

        for name, found, expected in (
            ("RIFF tag", header.riff_tag, RIFF_TAG),
            ("format tag", header.format_tag, WAVE_TAG),
            ("fmt chunk id", header.fmt_chunk_id, FMT_TAG),
            ("data chunk id", header.data_chunk_id, DATA_TAG),
        ):
            if found != expected:
                raise UnknownTagError(
                    f"Invalid {name}. Expected {expected!r}, got {found!r}"
                )

        if header.audio_format != WAVE_FORMAT_PCM:
            raise UnsupportedFormatError(
                f"Only PCM (format {WAVE_FORMAT_PCM}) is supported, got format {header.audio_format}"
            )

        return header

    @classmethod
    def read_from_stream(cls, stream: BinaryIO) -> "WavHeader":
        """Reads and unpacks the header from a binary stream."""
        return cls.unpack(stream.read(HEADER_SIZE))

    def write_to_stream(self, stream: BinaryIO):
        """Packs and writes the header to a binary stream."""
        stream.write(self.pack())

    def mismatches(self) -> List[str]:
        """
        Lists stored size and rate fields that disagree with the values
        derived from the other fields. An empty list means the header is
        canonical.
        """
        expected = WavHeader.for_payload(self.params, self.data_size)
        problems = []
        for name in ("riff_size", "fmt_chunk_size", "byte_rate", "block_align"):
            stored = getattr(self, name)
            derived = getattr(expected, name)
            if stored != derived:
                problems.append(f"{name} is {stored}, expected {derived}")
        if (self.bits_per_sample * self.channel_count) % 8 != 0:
            problems.append(
                f"{self.bits_per_sample} bits x {self.channel_count} channels "
                f"is not a whole number of bytes"
            )
        return problems

    def check_consistency(self):
        """Raises HeaderMismatchError if mismatches() is not empty."""
        problems = self.mismatches()
        if problems:
            raise HeaderMismatchError("; ".join(problems))

    def describe(self) -> str:
        """
        Returns a printable attribute/value table of the header fields.
        """
        format_name = "PCM" if self.audio_format == WAVE_FORMAT_PCM else str(self.audio_format)
        rows = [
            ("Magic", self.riff_tag.decode("ascii", errors="replace")),
            ("Size", format_size(self.riff_size)),
            ("WavID", self.format_tag.decode("ascii", errors="replace")),
            ("FmtID", self.fmt_chunk_id.decode("ascii", errors="replace")),
            ("FmtSize", format_size(self.fmt_chunk_size)),
            ("Format", format_name),
            ("Channels", str(self.channel_count)),
            ("SampleRate", f"{self.sample_rate} Hz"),
            ("BytesPerSec", str(self.byte_rate)),
            ("BlockSize", str(self.block_align)),
            ("BitsPerSample", str(self.bits_per_sample)),
            ("DataID", self.data_chunk_id.decode("ascii", errors="replace")),
            ("DataSize", format_size(self.data_size)),
        ]
        lines = ["[Attribute]   [Value]"]
        lines.extend(f"{name:<13} : {value}" for name, value in rows)
        return "\n".join(lines)
