"""Video filter chain composition."""

from typing import List

from ffmpeg_batch.common import FlagGroup
from ffmpeg_batch.options import OptionSet
from ffmpeg_batch.speed import split_speed


def speed_to_pts_factor(speed: float) -> float:
    """Return the setpts multiplier for a playback speed.

    setpts has no range limit, so the decomposed factors collapse back
    into a single multiplier.
    """
    factor = 1.0
    for part in split_speed(speed):
        factor /= part
    return factor


def generate_video_filters(options: OptionSet) -> List[str]:
    """Generate the ordered -vf chain entries for an option set."""
    parts: List[str] = []

    if options.crop:
        parts.append(f"crop={options.crop}")
    if options.fps:
        parts.append(f"fps=fps={options.fps}")
    if options.rotate:
        parts.append(f"transpose={options.rotate}")
    if options.reverse:
        parts.append("reverse")
    if options.scale:
        parts.append(f"scale={options.scale}")
    if options.has_speed_change:
        parts.append(f"setpts={speed_to_pts_factor(options.speed):0.6f}*PTS")

    return parts


def video_flag_groups(options: OptionSet) -> List[FlagGroup]:
    """Generate the -vf flag group, or nothing when no filter applies."""
    group = FlagGroup("-vf", generate_video_filters(options))
    if group.is_empty():
        return []
    return [group]
