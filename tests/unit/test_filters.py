"""
Unit tests for composing common, video and audio flag groups.
"""
from ffmpeg_batch.common import FlagGroup, flatten_groups
from ffmpeg_batch.filters import compose_filter_groups

from tests.fixtures.ffmpeg_factories import create_option_set


class TestFlagGroup:

    def test_renders_name_and_joined_values(self):
        assert FlagGroup("-vf", ["a", "b"]).to_args() == ["-vf", "a,b"]

    def test_bare_flag(self):
        assert FlagGroup("-an").to_args() == ["-an"]

    def test_is_empty(self):
        assert FlagGroup("-af").is_empty()
        assert not FlagGroup("-af", ["volume=2"]).is_empty()


class TestComposeFilterGroups:

    def test_category_order(self):
        opts = create_option_set(trim="1,2", volume="2", crop="10:10")
        names = [g.name for g in compose_filter_groups(opts, "a.mov")]

        assert names == ["-ss", "-to", "-vf", "-af"]

    def test_no_options_no_groups(self):
        assert compose_filter_groups(create_option_set(), "a.mov") == []

    def test_never_emits_empty_payload(self):
        opts = create_option_set(speed=1, trim="bad")
        for group in compose_filter_groups(opts, "a.mov"):
            assert group.values or group.name == "-an"

    def test_same_for_every_file(self):
        opts = create_option_set(speed=3, scale="2:2")

        assert compose_filter_groups(opts, "a.mov") == compose_filter_groups(opts, "b.mkv")


class TestImageOutputSuppressesAudio:

    def test_gif_output_drops_audio_filters(self):
        opts = create_option_set(format="gif", speed=3, volume="2")
        args = flatten_groups(compose_filter_groups(opts, "a.gif"))

        assert "-af" not in args
        assert args == ["-vf", "setpts=0.333333*PTS"]

    def test_gif_output_drops_no_audio_flag(self):
        opts = create_option_set(format="gif", no_audio=True)

        assert compose_filter_groups(opts, "a.gif") == []

    def test_video_output_keeps_audio(self):
        opts = create_option_set(format="mp4", volume="2")
        args = flatten_groups(compose_filter_groups(opts, "a.mp4"))

        assert args == ["-af", "volume=2"]
