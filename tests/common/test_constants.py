import unittest
from pymakewav.common import constants as c


class TestContainerConstants(unittest.TestCase):
    def test_header_size(self):
        self.assertEqual(c.HEADER_SIZE, 44, "Canonical PCM header should be 44 bytes")

    def test_riff_size_overhead(self):
        self.assertEqual(
            c.RIFF_SIZE_OVERHEAD,
            36,
            "riff_size should exceed data_size by the 36 header bytes after the size field",
        )

    def test_fmt_chunk_size(self):
        self.assertEqual(c.PCM_FMT_CHUNK_SIZE, 16, "PCM fmt chunk should be 16 bytes")

    def test_pcm_format_code(self):
        self.assertEqual(c.WAVE_FORMAT_PCM, 1, "Linear PCM format code should be 1")

    def test_tags_are_four_ascii_bytes(self):
        for tag in (c.RIFF_TAG, c.WAVE_TAG, c.FMT_TAG, c.DATA_TAG):
            self.assertIsInstance(tag, bytes)
            self.assertEqual(len(tag), c.TAG_SIZE)
            tag.decode("ascii")

    def test_fmt_tag_trailing_space(self):
        self.assertEqual(c.FMT_TAG, b"fmt ", "fmt tag keeps its trailing space")

    def test_max_payload_size(self):
        self.assertEqual(c.MAX_PAYLOAD_SIZE + 36, 0xFFFFFFFF)

    def test_driver_defaults(self):
        self.assertEqual(c.DEFAULT_CHANNELS, 2)
        self.assertEqual(c.DEFAULT_SAMPLE_RATE, 44100)
        self.assertEqual(c.DEFAULT_BITS_PER_SAMPLE, 16)
        self.assertEqual(c.OUTPUT_SUFFIX, "_out.wav")


if __name__ == "__main__":
    unittest.main()
