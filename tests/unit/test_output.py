"""
Unit tests for output path resolution and output target validation.
"""
import os

import pytest

from ffmpeg_batch.exceptions import OutputConflictError, OutputTargetError
from ffmpeg_batch.output import (
    check_output_target,
    is_image_output,
    resolve_output_path,
    set_file_format,
    validate_output,
)

from tests.fixtures.ffmpeg_factories import create_option_set


class TestSetFileFormat:

    def test_replaces_extension(self):
        assert set_file_format("a.mov", "mp4") == "a.mp4"

    def test_keeps_directories(self):
        assert set_file_format("/media/clips/a.mov", "gif") == "/media/clips/a.gif"

    def test_only_last_extension(self):
        assert set_file_format("a.tar.mov", "mp4") == "a.tar.mp4"

    def test_appends_when_no_extension(self):
        assert set_file_format("clip", "webm") == "clip.webm"

    def test_empty_format_is_noop(self):
        assert set_file_format("a.mov", "") == "a.mov"


class TestResolveOutputPath:

    def test_directory_with_format(self):
        opts = create_option_set(output="out/", output_is_dir=True, format="mp4")
        assert resolve_output_path(opts, "a.mov") == "out/a.mp4"

    def test_directory_uses_base_name(self):
        opts = create_option_set(output="out", output_is_dir=True)
        assert resolve_output_path(opts, "/media/x/a.mov") == os.path.join("out", "a.mov")

    def test_explicit_file_used_verbatim(self):
        opts = create_option_set(output="result.mp4", format="gif")
        assert resolve_output_path(opts, "a.mov") == "result.mp4"

    def test_format_replaces_extension_in_place(self):
        opts = create_option_set(format="gif")
        assert resolve_output_path(opts, "a.mov") == "a.gif"

    def test_no_output_no_format_is_unchanged(self):
        assert resolve_output_path(create_option_set(), "/media/a.mov") == "/media/a.mov"

    def test_format_with_leading_dot(self):
        opts = create_option_set(format=".mp4")
        assert resolve_output_path(opts, "a.mov") == "a.mp4"


class TestCheckOutputTarget:

    def test_single_file_with_explicit_output(self):
        check_output_target(create_option_set(output="result.mp4"), ["a.mov"])

    def test_multiple_files_with_explicit_output(self):
        with pytest.raises(OutputConflictError) as exc_info:
            check_output_target(create_option_set(output="result.mp4"), ["a.mov", "b.mov"])

        assert "directory" in str(exc_info.value)

    def test_multiple_files_with_directory(self):
        opts = create_option_set(output="out", output_is_dir=True)
        check_output_target(opts, ["a.mov", "b.mov"])

    def test_multiple_files_without_output(self):
        check_output_target(create_option_set(format="mp4"), ["a.mov", "b.mov"])


class TestValidateOutput:

    def test_existing_directory(self, tmp_path):
        assert validate_output(str(tmp_path)) is True

    def test_existing_file(self, tmp_path):
        target = tmp_path / "result.mp4"
        target.write_bytes(b"")

        assert validate_output(str(target)) is False

    def test_missing_path_with_extension_is_file(self, tmp_path):
        target = tmp_path / "result.mp4"

        assert validate_output(str(target)) is False
        assert not target.exists()

    def test_missing_path_without_extension_is_created(self, tmp_path):
        target = tmp_path / "converted"

        assert validate_output(str(target)) is True
        assert target.is_dir()

    def test_trailing_separator(self, tmp_path):
        target = str(tmp_path / "converted") + os.sep

        assert validate_output(target) is True
        assert os.path.isdir(target)

    def test_creation_failure(self, tmp_path):
        target = tmp_path / "missing-parent" / "converted"

        with pytest.raises(OutputTargetError):
            validate_output(str(target))


class TestIsImageOutput:

    @pytest.mark.parametrize("path", ["a.gif", "frame.png", "shot.JPG", "out/a.webp"])
    def test_image_output_paths(self, path):
        assert is_image_output(create_option_set(), path) is True

    def test_video_output_path(self):
        assert is_image_output(create_option_set(format="gif"), "a.mp4") is False

    def test_explicit_image_file_with_video_input(self):
        opts = create_option_set(output="frame.png")

        assert is_image_output(opts, resolve_output_path(opts, "clip.mov")) is True

    def test_extensionless_path_falls_back_to_format(self):
        assert is_image_output(create_option_set(format="gif"), "result") is True
        assert is_image_output(create_option_set(), "result") is False
