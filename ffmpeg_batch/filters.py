"""Compose the per-file filter flag groups in their fixed category order."""

from typing import List

from ffmpeg_batch.audio_filters import audio_flag_groups
from ffmpeg_batch.common import FlagGroup
from ffmpeg_batch.common_filters import trim_flag_groups
from ffmpeg_batch.options import OptionSet
from ffmpeg_batch.output import is_image_output
from ffmpeg_batch.video_filters import video_flag_groups


def compose_filter_groups(options: OptionSet, output_path: str) -> List[FlagGroup]:
    """Return common, video and audio flag groups, in that order.

    Audio groups are dropped when ``output_path`` (the resolved output)
    is an image.
    """
    groups = trim_flag_groups(options)
    groups.extend(video_flag_groups(options))
    if not is_image_output(options, output_path):
        groups.extend(audio_flag_groups(options))
    return groups
