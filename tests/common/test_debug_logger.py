"""
Tests for the debug logger.
"""

import numpy as np

from pymakewav.common import debug_logger as dl
from pymakewav.common.debug_logger import WavDebugLogger


class TestWavDebugLogger:
    """Test cases for WavDebugLogger."""

    def test_enabled_writes_file_header(self, tmp_path):
        log_file = tmp_path / "debug.log"
        WavDebugLogger(str(log_file), enabled=True)
        content = log_file.read_text()
        assert content.startswith("# pymakewav Debug Log")

    def test_disabled_creates_no_file(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = WavDebugLogger(str(log_file), enabled=False)
        logger.log_stage("STAGE", "samples", [1, 2, 3])
        assert not log_file.exists()

    def test_log_stage_statistics(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = WavDebugLogger(str(log_file))
        logger.log_stage("PAYLOAD_SAMPLES", "samples", np.array([[0, 4], [-2, 0]]), channels=2)

        line = log_file.read_text().splitlines()[-1]
        assert "[MAKEWAV]" in line
        assert "[test_debug_logger.py:" in line
        assert "PAYLOAD_SAMPLES: samples=[0,4,-2,0]" in line
        assert "size=4 range=[-2,4]" in line
        assert "nonzero=2" in line
        assert "|SRC: channels=2" in line

    def test_log_stage_truncates_long_arrays(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = WavDebugLogger(str(log_file))
        logger.log_stage("LONG", "samples", list(range(20)))

        line = log_file.read_text().splitlines()[-1]
        assert "samples=[0,1,2,3,4...15,16,17,18,19]" in line
        assert "size=20" in line

    def test_log_stage_scalar(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = WavDebugLogger(str(log_file))
        logger.log_stage("RATE", "value", 44100)

        line = log_file.read_text().splitlines()[-1]
        assert "RATE: value=44100" in line
        assert "size=1" in line

    def test_log_stage_empty(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = WavDebugLogger(str(log_file))
        logger.log_stage("EMPTY", "samples", [])

        line = log_file.read_text().splitlines()[-1]
        assert "size=0 range=[0,0]" in line

    def test_log_bytes_hex(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = WavDebugLogger(str(log_file))
        logger.log_bytes("HEADER", b"RIFF")

        line = log_file.read_text().splitlines()[-1]
        assert "HEADER: hex=52494646" in line
        assert "size=4 bytes" in line

    def test_log_bytes_truncated(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = WavDebugLogger(str(log_file))
        logger.log_bytes("BLOB", b"\xff" * 10, max_bytes=2)

        line = log_file.read_text().splitlines()[-1]
        assert "hex=ffff..." in line
        assert "size=10 bytes" in line

    def test_enable_disable(self, tmp_path):
        logger = WavDebugLogger(str(tmp_path / "debug.log"), enabled=False)
        logger.enable()
        assert logger.enabled is True
        logger.disable()
        assert logger.enabled is False


class TestGlobalDebugLogging:
    """Test cases for the module level helpers."""

    def test_global_logger_instance(self):
        assert isinstance(dl.debug_logger, WavDebugLogger)

    def test_enable_then_log(self, tmp_path, monkeypatch):
        monkeypatch.setattr(dl, "debug_logger", dl.debug_logger)
        log_file = tmp_path / "global.log"

        dl.enable_debug_logging(str(log_file))
        dl.log_debug("STAGE", "samples", [1, 2])
        dl.log_bytes("HEADER", b"\x00\x01")
        dl.disable_debug_logging()
        dl.log_debug("AFTER", "samples", [3])

        content = log_file.read_text()
        assert "STAGE: samples=[1,2]" in content
        assert "HEADER: hex=0001" in content
        assert "AFTER" not in content
