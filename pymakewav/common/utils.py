"""
Common utility functions for the pymakewav project.
"""

import os

from pymakewav.common.constants import OUTPUT_SUFFIX


def format_size(num_bytes: int) -> str:
    """
    Formats a byte count as "<bytes> bytes | <Kb> Kb | <Mb> Mb" using
    integer division, as shown in header summaries.
    """
    return f"{num_bytes} bytes | {num_bytes // 1024} Kb | {num_bytes // 1024 // 1024} Mb"


def derive_output_path(input_path: str, suffix: str = OUTPUT_SUFFIX) -> str:
    """
    Builds the default output path for a wrapped file.

    The file name is cut at its first '.', so "dir/blob.tar.gz" becomes
    "dir/blob_out.wav". Names starting with a dot keep their full name.

    Args:
        input_path: Path of the input blob.
        suffix: Text appended to the stem.

    Returns:
        The output path, in the same directory as the input.
    """
    directory, name = os.path.split(input_path)
    stem = name.split(".", 1)[0] or name
    return os.path.join(directory, stem + suffix)
