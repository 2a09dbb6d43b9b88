"""Audio filter chain composition."""

from typing import List

from ffmpeg_batch.common import FlagGroup
from ffmpeg_batch.options import OptionSet
from ffmpeg_batch.speed import split_speed


def generate_atempo_filters(speed: float) -> List[str]:
    """Generate one atempo entry per factor of the decomposed speed."""
    return [f"atempo={factor:0.6f}" for factor in split_speed(speed)]


def generate_audio_filters(options: OptionSet) -> List[str]:
    """Generate the ordered -af chain entries for an option set."""
    parts: List[str] = []

    if options.reverse:
        parts.append("areverse")
    if options.has_speed_change:
        parts.extend(generate_atempo_filters(options.speed))
    if options.volume:
        parts.append(f"volume={options.volume}")

    return parts


def audio_flag_groups(options: OptionSet) -> List[FlagGroup]:
    """Generate audio flag groups.

    ``no_audio`` wins over every other audio option and yields a bare -an.
    """
    if options.no_audio:
        return [FlagGroup("-an")]

    group = FlagGroup("-af", generate_audio_filters(options))
    if group.is_empty():
        return []
    return [group]
