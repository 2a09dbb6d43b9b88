"""Output target validation and per-file output path resolution."""

import logging
import os
import stat
from typing import Sequence

from ffmpeg_batch.exceptions import OutputConflictError, OutputTargetError
from ffmpeg_batch.options import OptionSet

logger = logging.getLogger(__name__)

# Formats that hold frames only; audio filters make no sense for these
IMAGE_FORMATS = {
    "gif", "apng", "png", "jpg", "jpeg", "bmp", "webp", "tiff",
}


def set_file_format(path: str, fmt: str) -> str:
    """Replace the extension of ``path`` with ``fmt``.

    A path without an extension gets one appended. An empty ``fmt``
    leaves the path untouched.
    """
    if not fmt:
        return path
    root, _ = os.path.splitext(path)
    return f"{root}.{fmt}"


def file_extension(path: str) -> str:
    return os.path.splitext(path)[1].lstrip(".").lower()


def is_image_output(options: OptionSet, output_path: str) -> bool:
    """Whether this job writes an image (frame-extraction) target.

    ``output_path`` is the resolved output; its extension decides, with the
    target format as the fallback for extensionless paths.
    """
    fmt = file_extension(output_path) or options.format.lower()
    return fmt in IMAGE_FORMATS


def resolve_output_path(options: OptionSet, input_path: str) -> str:
    """Resolve where ffmpeg should write the output for ``input_path``.

    Precedence: output directory, explicit output file, target format,
    then the input path itself (an in-place rewrite needing --force).
    """
    if options.output_is_dir:
        name = set_file_format(os.path.basename(input_path), options.format)
        return os.path.join(options.output, name)
    if options.output:
        return options.output
    if options.format:
        return set_file_format(input_path, options.format)
    return input_path


def check_output_target(options: OptionSet, inputs: Sequence[str]) -> None:
    """Reject a single output file shared by several inputs.

    Raises:
        OutputConflictError: If an explicit output file is set and more than
            one input was given.
    """
    if options.output and not options.output_is_dir and len(inputs) > 1:
        raise OutputConflictError(
            "attempting to write all file matches to a single file; "
            "did you mean to provide a directory?"
        )


def validate_output(path: str) -> bool:
    """Inspect an output target and report whether it is a directory.

    A missing path without an extension is created as a directory. A
    missing path with an extension is treated as an output file.

    Raises:
        OutputTargetError: If the directory cannot be created or the path
            cannot be inspected.
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        raise OutputTargetError(f"cannot inspect output {path}: {e}") from e
    else:
        return stat.S_ISDIR(st.st_mode)

    if os.path.splitext(path.rstrip(os.sep))[1]:
        return False
    try:
        os.mkdir(path)
    except OSError as e:
        raise OutputTargetError(f"cannot create output directory {path}: {e}") from e
    logger.info("Created output directory %s", path)
    return True
