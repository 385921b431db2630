"""
Tests for the payload sample view.
"""

import numpy as np
import pytest

from pymakewav.core.samples import (
    duration_seconds,
    frame_count,
    payload_to_samples,
    sample_stats,
)
from pymakewav.wav.header import AudioParams, WavHeader


class TestPayloadToSamples:
    """Test cases for payload_to_samples."""

    def test_16bit_stereo(self):
        payload = np.array([0, 1, -2, 32767], dtype="<i2").tobytes()
        samples = payload_to_samples(payload, 2, 16)
        assert samples.shape == (2, 2)
        assert samples.tolist() == [[0, 1], [-2, 32767]]

    def test_8bit_unsigned(self):
        samples = payload_to_samples(b"\x00\x80\xff", 1, 8)
        assert samples.dtype == np.uint8
        assert samples[:, 0].tolist() == [0, 128, 255]

    def test_24bit_sign_extension(self):
        payload = b"\x01\x00\x00" + b"\xff\xff\xff" + b"\x00\x00\x80" + b"\xff\xff\x7f"
        samples = payload_to_samples(payload, 1, 24)
        assert samples[:, 0].tolist() == [1, -1, -(1 << 23), (1 << 23) - 1]

    def test_32bit(self):
        payload = np.array([-5, 7], dtype="<i4").tobytes()
        assert payload_to_samples(payload, 2, 32).tolist() == [[-5, 7]]

    def test_partial_frame_dropped(self):
        """Ten 0xFF bytes as 16-bit stereo hold two whole frames."""
        samples = payload_to_samples(b"\xff" * 10, 2, 16)
        assert samples.shape == (2, 2)
        assert (samples == -1).all()

    def test_empty_payload(self):
        samples = payload_to_samples(b"", 2, 24)
        assert samples.shape == (0, 2)

    def test_unsupported_depth(self):
        with pytest.raises(ValueError, match="Unsupported bit depth for sample view: 12"):
            payload_to_samples(b"\x00" * 3, 2, 12)

    def test_zero_channels(self):
        with pytest.raises(ValueError, match="Channel count must be at least 1"):
            payload_to_samples(b"\x00", 0, 8)


class TestHeaderTiming:
    """Test cases for frame_count and duration_seconds."""

    def test_one_second_cd_audio(self):
        header = WavHeader.for_payload(AudioParams(2, 44100, 16), 176400)
        assert frame_count(header) == 44100
        assert duration_seconds(header) == pytest.approx(1.0)

    def test_partial_frame(self):
        header = WavHeader.for_payload(AudioParams(2, 44100, 16), 10)
        assert frame_count(header) == 2

    def test_zero_block_align(self):
        header = WavHeader.for_payload(AudioParams(0, 44100, 16), 10)
        assert frame_count(header) == 0
        assert duration_seconds(header) == 0.0

    def test_zero_sample_rate(self):
        header = WavHeader.for_payload(AudioParams(1, 0, 8), 10)
        assert duration_seconds(header) == 0.0


class TestSampleStats:
    """Test cases for sample_stats."""

    def test_full_scale_16bit(self):
        samples = np.array([[-32768], [0]], dtype=np.int16)
        stats = sample_stats(samples, 16)
        assert stats["peak"] == pytest.approx(1.0)
        assert stats["rms"] == pytest.approx(np.sqrt(0.5))

    def test_8bit_midpoint_is_silence(self):
        samples = np.array([[128], [128]], dtype=np.uint8)
        assert sample_stats(samples, 8) == {"peak": 0.0, "rms": 0.0}

    def test_empty(self):
        assert sample_stats(np.zeros((0, 2)), 16) == {"peak": 0.0, "rms": 0.0}
