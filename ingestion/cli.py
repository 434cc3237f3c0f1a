"""
Command-line surface for reading, writing and analysing WAV files.

CLI entry point::

    python -m ingestion.cli read --path tone.wav --time 50
    python -m ingestion.cli write-sine --output tone.wav --freq 220 --ampl 0.2
    python -m ingestion.cli pitch --path tone.wav --window-ms 500
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from core.audio.errors import AudioError, NoPeriodFoundError
from core.audio.wav import HEADER_SIZE
from core.config import AnalysisConfig, AudioConfig
from ingestion.wave_engine import WaveEngine

logger = logging.getLogger(__name__)


def _cmd_read(engine: WaveEngine, args: argparse.Namespace) -> int:
    report = engine.read_samples_until(args.path, time_ms=args.time)
    print("DATA SECTION")
    for sample in report.samples:
        value = int(sample)
        print(f"SAMPLE VALUE as hex {value & 0xFFFF:04x} - dec {value}")
    return 0


def _cmd_write_sine(engine: WaveEngine, args: argparse.Namespace) -> int:
    config = AudioConfig(
        channels=args.channels,
        sample_rate_hz=args.rate,
        duration_sec=args.duration,
    )
    path = engine.write_sine(
        args.output,
        frequency_hz=args.freq,
        amplitude=args.ampl,
        config=config,
    )
    print(f"Wrote {config.sample_count} samples ({config.data_size + 44} bytes) to {path}")
    return 0


def _cmd_pitch(engine: WaveEngine, args: argparse.Namespace) -> int:
    analysis = AnalysisConfig(
        window_ms=args.window_ms,
        min_frequency_hz=args.min_freq,
        workers=args.workers,
    )
    try:
        estimate = engine.analyze_pitch(args.path, analysis)
    except NoPeriodFoundError:
        print(f"{args.path}: no discernible pitch")
        return 0

    print(f"Period in samples: {estimate.period_samples}")
    print(f"frequency: {estimate.frequency_hz:.2f} Hz")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the ``wavemaker`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="wavemaker",
        description="Read, write and analyse linear-PCM WAV files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    read = sub.add_parser("read", help="Read a WAV file and print its samples.")
    read.add_argument("-p", "--path", required=True, help="Path to the WAV file.")
    read.add_argument(
        "-t",
        "--time",
        type=int,
        default=1000,
        help="Print samples up to this time in ms (default: 1000).",
    )
    read.set_defaults(handler=_cmd_read)

    write = sub.add_parser("write-sine", help="Write a sine tone to a WAV file.")
    write.add_argument("-o", "--output", required=True, help="Destination path.")
    write.add_argument("-f", "--freq", type=float, required=True, help="Frequency in Hz.")
    write.add_argument(
        "-a",
        "--ampl",
        type=float,
        default=0.2,
        help="Amplitude in [0, 1] relative to full scale (default: 0.2).",
    )
    write.add_argument(
        "--duration",
        type=float,
        default=5.0,
        help="Duration in seconds (default: 5).",
    )
    write.add_argument(
        "--rate",
        type=int,
        default=44100,
        help="Sample rate in Hz (default: 44100).",
    )
    write.add_argument(
        "--channels",
        type=int,
        default=1,
        help="Number of interleaved channels (default: 1).",
    )
    write.set_defaults(handler=_cmd_write_sine)

    pitch = sub.add_parser("pitch", help="Estimate the fundamental frequency of a mono file.")
    pitch.add_argument("-p", "--path", required=True, help="Path to the WAV file.")
    pitch.add_argument(
        "--window-ms",
        type=int,
        default=1000,
        help="Analyse only the first N ms (default: 1000).",
    )
    pitch.add_argument(
        "--min-freq",
        type=float,
        default=50.0,
        help="Lowest frequency to search for, in Hz (default: 50).",
    )
    pitch.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads for the AMDF reduction (default: 1).",
    )
    pitch.set_defaults(handler=_cmd_pitch)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments and dispatch to the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    engine = WaveEngine()
    try:
        return args.handler(engine, args)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except (AudioError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
