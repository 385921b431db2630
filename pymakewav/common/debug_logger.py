"""
Debug trace for pymakewav conversions.
Writes timestamped, source-tagged lines describing each conversion stage
(header bytes, payload sample statistics) to a log file.
"""

import inspect
import os
import time
from typing import Any, List, Tuple, Union

import numpy as np


def _timestamp() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(time.time() * 1000000) % 1000000:06d}"


def _caller() -> Tuple[str, int, str]:
    """Returns (file, line, function) of the first frame outside this module."""
    frame_info = inspect.currentframe()
    while frame_info is not None and frame_info.f_code.co_filename == __file__:
        frame_info = frame_info.f_back
    if frame_info is None:
        return ("?", 0, "?")
    return (
        os.path.basename(frame_info.f_code.co_filename),
        frame_info.f_lineno,
        frame_info.f_code.co_name,
    )


def _context_str(context: dict) -> str:
    return " ".join(f"{key}={value}" for key, value in context.items())


class WavDebugLogger:
    """
    Debug logger for conversion stages.
    Each entry carries its source location, the logged values and summary
    statistics.
    """

    def __init__(self, log_file: str = "makewav_debug.log", enabled: bool = True):
        self.log_file = log_file
        self.enabled = enabled
        if enabled:
            # Clear log file and write header
            with open(log_file, "w") as f:
                f.write(f"# pymakewav Debug Log - {time.strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("# Format: [TIMESTAMP][MAKEWAV][FILE:LINE][FUNC] STAGE: data_type=values |META: ... |SRC: ...\n")
                f.write("#\n")

    def _write(self, entry: str) -> None:
        with open(self.log_file, "a") as f:
            f.write(entry)

    def log_stage(
        self,
        stage: str,
        data_type: str,
        values: Union[List, np.ndarray, float, int],
        **context,
    ) -> None:
        """
        Log a conversion stage with summary metadata.

        Args:
            stage: Stage name (e.g. 'PAYLOAD_SAMPLES', 'HEADER_FIELDS')
            data_type: Kind of data logged (e.g. 'samples', 'fields')
            values: The values, scalar or array-like
            **context: Extra key=value pairs (path, channels, ...)
        """
        if not self.enabled:
            return

        filename, line_no, func_name = _caller()

        if isinstance(values, (int, float)):
            values_array = np.array([values], dtype=np.float64)
            values_str = f"{values}"
        else:
            values_array = np.asarray(values, dtype=np.float64).ravel()
            if values_array.size <= 10:
                values_str = f"[{','.join(f'{v:g}' for v in values_array)}]"
            else:
                # Show first 5 and last 5 values
                first_5 = ",".join(f"{v:g}" for v in values_array[:5])
                last_5 = ",".join(f"{v:g}" for v in values_array[-5:])
                values_str = f"[{first_5}...{last_5}]"

        size = int(values_array.size)
        if size > 0:
            min_val = float(np.min(values_array))
            max_val = float(np.max(values_array))
            mean_val = float(np.mean(values_array))
            nonzero_count = int(np.count_nonzero(values_array))
        else:
            min_val = max_val = mean_val = 0.0
            nonzero_count = 0

        self._write(
            f"[{_timestamp()}][MAKEWAV][{filename}:{line_no}][{func_name}] {stage}: "
            f"{data_type}={values_str} "
            f"|META: size={size} range=[{min_val:g},{max_val:g}] "
            f"mean={mean_val:.6f} nonzero={nonzero_count} "
            f"|SRC: {_context_str(context)}\n"
        )

    def log_bytes(self, stage: str, raw: bytes, max_bytes: int = 64, **context) -> None:
        """
        Log a byte string in hex, truncated to max_bytes.
        """
        if not self.enabled:
            return

        filename, line_no, func_name = _caller()
        hex_str = bytes(raw[:max_bytes]).hex()
        if len(raw) > max_bytes:
            hex_str += "..."

        self._write(
            f"[{_timestamp()}][MAKEWAV][{filename}:{line_no}][{func_name}] {stage}: "
            f"hex={hex_str} "
            f"|META: size={len(raw)} bytes "
            f"|SRC: {_context_str(context)}\n"
        )

    def enable(self):
        """Enable logging."""
        self.enabled = True

    def disable(self):
        """Disable logging."""
        self.enabled = False


# Global logger instance, silent until enable_debug_logging() is called
debug_logger = WavDebugLogger(enabled=False)


def log_debug(stage: str, data_type: str, values: Any, **kwargs) -> None:
    """
    Convenience function for logging with global logger instance.

    Usage:
        log_debug("PAYLOAD_SAMPLES", "samples", samples, channels=2)
    """
    debug_logger.log_stage(stage, data_type, values, **kwargs)


def log_bytes(stage: str, raw: bytes, **kwargs) -> None:
    """
    Convenience function for hex logging.
    """
    debug_logger.log_bytes(stage, raw, **kwargs)


def enable_debug_logging(log_file: str = "makewav_debug.log") -> None:
    """
    Enable debug logging with specified log file.
    """
    global debug_logger
    debug_logger = WavDebugLogger(log_file, enabled=True)


def disable_debug_logging() -> None:
    """
    Disable debug logging.
    """
    debug_logger.disable()
