"""Flags shared by audio and video: input trimming."""

import logging
from typing import List

from ffmpeg_batch.common import FlagGroup
from ffmpeg_batch.options import OptionSet

logger = logging.getLogger(__name__)


def parse_trim(trim: str) -> tuple[str, str] | None:
    """Split a ``"start,end"`` trim range.

    Returns None unless the string splits into exactly two parts. Either
    part may be empty.
    """
    parts = trim.split(",")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def trim_flag_groups(options: OptionSet) -> List[FlagGroup]:
    """Generate -ss / -to flag groups from the trim range."""
    if not options.trim:
        return []

    bounds = parse_trim(options.trim)
    if bounds is None:
        # Malformed ranges are ignored, not reported
        logger.debug("Ignoring malformed trim range %r", options.trim)
        return []

    start, end = bounds
    groups: List[FlagGroup] = []
    if start:
        groups.append(FlagGroup("-ss", [start]))
    if end:
        groups.append(FlagGroup("-to", [end]))
    return groups
