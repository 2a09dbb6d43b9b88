"""
peg - ffmpeg for the rest of us.

Usage:
    peg --format mp4 clip.mov
    peg --parallel 4 --scale 640:-1 --output out/ *.mov
"""

import argparse
import asyncio
import logging
import signal
import sys
from typing import List, Optional

from ffmpeg_batch import __version__
from ffmpeg_batch.config import get_settings
from ffmpeg_batch.dispatcher import convert_all
from ffmpeg_batch.exceptions import PegError
from ffmpeg_batch.log_utils import configure_logging
from ffmpeg_batch.options import OptionSet
from ffmpeg_batch.output import validate_output

logger = logging.getLogger(__name__)

PROG = "peg"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="ffmpeg for the rest of us",
        epilog="example: peg --format mp4 $FILE",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="media files to convert")
    parser.add_argument("--crop", default="", help="crop original media to provided dimensions")
    parser.add_argument("--force", action="store_true", help="force files to override existing files")
    parser.add_argument("--format", default="", help="convert input to desired format")
    parser.add_argument("--fps", default="", help="set frames per second")
    parser.add_argument("--no-audio", action="store_true", help="remove audio from input files")
    parser.add_argument("--output", default="", help="file or directory to write output")
    parser.add_argument(
        "--parallel", type=int, default=1, dest="workers",
        help="number of files to process concurrently; defaults to synchronous operation",
    )
    parser.add_argument("--quiet", action="store_true", help="hide ffmpeg output")
    parser.add_argument("--reverse", action="store_true", help="reverse the video and audio of media provided")
    parser.add_argument("--rotate", default="", help="rotate the video (ffmpeg transpose value)")
    parser.add_argument("--scale", default="", help="scale media")
    parser.add_argument("--show-command", action="store_true", help="show the raw ffmpeg command to be run")
    parser.add_argument("--speed", type=float, default=0.0, help="adjustment of media speed")
    parser.add_argument("--trim", default="", help="trim content of the media, as START,END")
    parser.add_argument("--volume", default="", help="adjustment of media volume")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace, output_is_dir: bool) -> OptionSet:
    """Build the immutable option set from parsed arguments."""
    return OptionSet(
        crop=args.crop,
        fps=args.fps,
        rotate=args.rotate,
        scale=args.scale,
        speed=args.speed,
        volume=args.volume,
        trim=args.trim,
        format=args.format,
        no_audio=args.no_audio,
        reverse=args.reverse,
        force=args.force,
        workers=args.workers,
        output=args.output,
        output_is_dir=output_is_dir,
        show_command=args.show_command,
        quiet=args.quiet,
    )


def install_signal_handlers(cancel: asyncio.Event) -> None:
    """Set ``cancel`` on SIGINT or SIGTERM."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, cancel.set)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(sig, lambda *_: loop.call_soon_threadsafe(cancel.set))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().log_level)

    try:
        output_is_dir = validate_output(args.output) if args.output else False
        options = options_from_args(args, output_is_dir)
        error = convert_all(options, args.files, install_signals=install_signal_handlers)
    except PegError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # pydantic ValidationError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if error is not None:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
