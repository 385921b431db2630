"""
Interprets a container payload as interleaved PCM sample frames.
Used for reporting only; the codec itself never looks inside the payload.
"""

from typing import Dict

import numpy as np

from pymakewav.wav.header import WavHeader

# Little-endian sample layouts, 8-bit PCM is unsigned.
SAMPLE_DTYPES = {
    8: np.dtype(np.uint8),
    16: np.dtype("<i2"),
    32: np.dtype("<i4"),
}
SUPPORTED_BIT_DEPTHS = (8, 16, 24, 32)


def payload_to_samples(
    payload: bytes, channel_count: int, bits_per_sample: int
) -> np.ndarray:
    """
    Views the payload as a (frames, channels) integer array.

    Args:
        payload: Raw interleaved sample bytes.
        channel_count: Number of interleaved channels.
        bits_per_sample: 8, 16, 24 or 32.

    Returns:
        An array with one row per complete sample frame. Trailing bytes that
        do not form a whole frame are dropped.
    """
    if channel_count < 1:
        raise ValueError(f"Channel count must be at least 1, got {channel_count}")
    if bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        raise ValueError(
            f"Unsupported bit depth for sample view: {bits_per_sample}. "
            f"Expected one of {SUPPORTED_BIT_DEPTHS}"
        )

    sample_width = bits_per_sample // 8
    block_align = sample_width * channel_count
    num_frames = len(payload) // block_align
    usable = payload[: num_frames * block_align]

    if bits_per_sample == 24:
        raw = np.frombuffer(usable, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
        values = raw[:, 0] | (raw[:, 1] << 8) | (raw[:, 2] << 16)
        values = np.where(values >= 1 << 23, values - (1 << 24), values)
    else:
        values = np.frombuffer(usable, dtype=SAMPLE_DTYPES[bits_per_sample])

    return values.reshape(num_frames, channel_count)


def frame_count(header: WavHeader) -> int:
    """Number of complete sample frames in the payload."""
    if header.block_align == 0:
        return 0
    return header.data_size // header.block_align


def duration_seconds(header: WavHeader) -> float:
    """Playback length of the payload in seconds."""
    if header.sample_rate == 0:
        return 0.0
    return frame_count(header) / header.sample_rate


def sample_stats(samples: np.ndarray, bits_per_sample: int) -> Dict[str, float]:
    """
    Computes peak and RMS level of the samples, normalized to [0, 1].
    """
    if samples.size == 0:
        return {"peak": 0.0, "rms": 0.0}

    values = samples.astype(np.float64)
    if bits_per_sample == 8:
        normalized = (values - 128.0) / 128.0
    else:
        normalized = values / float(1 << (bits_per_sample - 1))

    return {
        "peak": float(np.max(np.abs(normalized))),
        "rms": float(np.sqrt(np.mean(normalized**2))),
    }
