import argparse
import os
import sys

from pymakewav.common.console_logger import console_logger
from pymakewav.common.constants import (
    DEFAULT_BITS_PER_SAMPLE,
    DEFAULT_CHANNELS,
    DEFAULT_SAMPLE_RATE,
)
from pymakewav.common.debug_logger import enable_debug_logging, log_bytes, log_debug
from pymakewav.common.utils import derive_output_path
from pymakewav.core.samples import (
    SUPPORTED_BIT_DEPTHS,
    duration_seconds,
    frame_count,
    payload_to_samples,
    sample_stats,
)
from pymakewav.wav.errors import WavError
from pymakewav.wav.header import AudioParams
from pymakewav.wav.wav_reader import WavReader, WavReaderError
from pymakewav.wav.wav_writer import WavWriter, WavWriterError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Prepend a PCM WAV header to any file, or inspect a WAV container"
    )
    parser.add_argument(
        "input",
        type=str,
        help="Path to the input file (any file for encode; .wav for decode)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output path. Encode defaults to '<input name>_out.wav'; "
        "decode writes the raw payload here if given",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=str,
        choices=["encode", "decode"],
        default="encode",
        help="'encode' wraps the input in a WAV container, 'decode' parses a container",
    )
    parser.add_argument(
        "-c",
        "--channels",
        type=int,
        default=DEFAULT_CHANNELS,
        help=f"Channel count for encode (default: {DEFAULT_CHANNELS})",
    )
    parser.add_argument(
        "-r",
        "--sample-rate",
        type=int,
        default=DEFAULT_SAMPLE_RATE,
        help=f"Sample rate in Hz for encode (default: {DEFAULT_SAMPLE_RATE})",
    )
    parser.add_argument(
        "-b",
        "--bits",
        type=int,
        default=DEFAULT_BITS_PER_SAMPLE,
        help=f"Bits per sample for encode (default: {DEFAULT_BITS_PER_SAMPLE})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Decode only: reject headers whose size or rate fields are inconsistent",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Do not print the header table",
    )
    parser.add_argument(
        "--debug-log",
        type=str,
        help="Enable debug logging to specified file (e.g., --debug-log makewav_debug.log)",
    )
    return parser


def _log_payload_samples(header, payload: bytes) -> None:
    if header.bits_per_sample not in SUPPORTED_BIT_DEPTHS or header.channel_count == 0:
        return
    samples = payload_to_samples(payload, header.channel_count, header.bits_per_sample)
    log_debug(
        "PAYLOAD_SAMPLES",
        "samples",
        samples,
        channels=header.channel_count,
        bits=header.bits_per_sample,
    )


def encode_file(args) -> int:
    output = args.output or derive_output_path(args.input)
    params = AudioParams(
        channel_count=args.channels,
        sample_rate=args.sample_rate,
        bits_per_sample=args.bits,
    )

    try:
        with open(args.input, "rb") as f_in:
            payload = f_in.read()

        console_logger.info(
            f"Creating WAV file header structure... ({params.channel_count} channels, "
            f"{params.sample_rate} Hz, {params.bits_per_sample}-bit)"
        )
        with WavWriter(output, params) as writer:
            console_logger.info(
                f"Writing the sound data to the file... ({len(payload)} bytes)"
            )
            console_logger.info(f"Writing output file to '{output}'...")
            header = writer.write(payload)

        log_bytes("HEADER", header.pack(), path=output)
        _log_payload_samples(header, payload)

    except WavError as e:
        console_logger.error(str(e))
        return 1
    except WavWriterError as e:
        console_logger.error(f"Error writing WAV file: {e}")
        return 1
    except OSError as e:
        console_logger.error(f"Error reading input file: {e}")
        return 1

    if not args.no_header:
        console_logger.plain(header.describe())
    console_logger.success("Success!")
    return 0


def decode_file(args) -> int:
    console_logger.info(f"Decoding '{args.input}'...")

    try:
        with WavReader(args.input, strict=args.strict) as reader:
            header = reader.get_header()
            payload = reader.payload
            samples = None
            if (
                header.bits_per_sample in SUPPORTED_BIT_DEPTHS
                and header.channel_count > 0
            ):
                samples = reader.samples()

        log_bytes("HEADER", header.pack(), path=args.input)
        if samples is not None:
            log_debug("PAYLOAD_SAMPLES", "samples", samples, channels=header.channel_count)

        if not args.no_header:
            console_logger.plain(header.describe())

        for problem in header.mismatches():
            console_logger.info(f"Warning: {problem}")

        console_logger.info(
            f"Payload: {len(payload)} bytes, {frame_count(header)} frames "
            f"({duration_seconds(header):.2f}s)"
        )
        if samples is not None:
            stats = sample_stats(samples, header.bits_per_sample)
            console_logger.info(
                f"Level: peak {stats['peak']:.3f}, rms {stats['rms']:.3f}"
            )

        if args.output:
            console_logger.info(f"Writing payload to '{args.output}'...")
            with open(args.output, "wb") as f_out:
                f_out.write(payload)

    except WavError as e:
        console_logger.error(str(e))
        return 1
    except WavReaderError as e:
        console_logger.error(f"Error reading WAV file: {e}")
        return 1
    except OSError as e:
        console_logger.error(f"Error writing payload file: {e}")
        return 1

    console_logger.success("Success!")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Enable debug logging if requested
    if args.debug_log:
        enable_debug_logging(args.debug_log)
        console_logger.info(f"Debug logging enabled to: {args.debug_log}")

    if not os.path.isfile(args.input):
        console_logger.error(f"File does not exist: {args.input}")
        return 1

    if args.mode == "encode":
        return encode_file(args)
    return decode_file(args)


if __name__ == "__main__":
    sys.exit(main())
