"""
Global constants for the pymakewav container codec.
These constants define the fixed 44-byte RIFF/WAVE header layout and the
defaults used by the command line driver.
"""

HEADER_SIZE = 44
RIFF_CHUNK_PREAMBLE = 8
RIFF_SIZE_OVERHEAD = HEADER_SIZE - RIFF_CHUNK_PREAMBLE
PCM_FMT_CHUNK_SIZE = 16
WAVE_FORMAT_PCM = 1

RIFF_TAG = b"RIFF"
WAVE_TAG = b"WAVE"
FMT_TAG = b"fmt "
DATA_TAG = b"data"
TAG_SIZE = 4

MAX_U16 = 0xFFFF
MAX_U32 = 0xFFFFFFFF
# riff_size = data_size + 36 must still fit in a u32
MAX_PAYLOAD_SIZE = MAX_U32 - RIFF_SIZE_OVERHEAD

DEFAULT_CHANNELS = 2
DEFAULT_SAMPLE_RATE = 44100
DEFAULT_BITS_PER_SAMPLE = 16
OUTPUT_SUFFIX = "_out.wav"
