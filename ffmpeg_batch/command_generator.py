"""Full command generation for a single input file."""

import os
import shlex
from typing import List

from ffmpeg_batch.common import Job, flatten_groups
from ffmpeg_batch.filters import compose_filter_groups
from ffmpeg_batch.options import OptionSet
from ffmpeg_batch.output import resolve_output_path

DEFAULT_BINARY = "ffmpeg"


def generate_global_flags(options: OptionSet) -> List[str]:
    flags: List[str] = []
    if options.force:
        flags.append("-y")
    return flags


def generate_command(
    options: OptionSet,
    input_path: str,
    binary: str = DEFAULT_BINARY,
) -> List[str]:
    """Generate a complete ffmpeg command list for one input.

    Argument order: ffmpeg [global] -i <input> [trim] [-vf] [-af|-an] <output>
    """
    cleaned = os.path.normpath(input_path)

    cmd: List[str] = [binary]
    cmd.extend(generate_global_flags(options))
    cmd.extend(["-i", cleaned])
    output_path = resolve_output_path(options, cleaned)
    cmd.extend(flatten_groups(compose_filter_groups(options, output_path)))

    # Output path is always last
    cmd.append(output_path)
    return cmd


def format_command(command: List[str]) -> str:
    """Render a command list as a single shell-quoted line."""
    return shlex.join(command)


def build_job(
    options: OptionSet,
    input_path: str,
    binary: str = DEFAULT_BINARY,
) -> Job:
    """Build the Job for one input; the output path is the command's last argument."""
    command = generate_command(options, input_path, binary=binary)
    return Job(input_path=input_path, output_path=command[-1], command=command)
