"""Validated, immutable transform options shared by every job in a batch."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OptionSet(BaseModel):
    """Transform parameters for one invocation of the whole batch.

    String-valued filters (crop, fps, rotate, scale, volume) are passed
    through to ffmpeg as given. ``speed`` of 0 means "unset".
    """

    model_config = ConfigDict(frozen=True)

    crop: str = ""
    fps: str = ""
    rotate: str = ""
    scale: str = ""
    speed: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    volume: str = ""
    # "start,end"; either side may be empty
    trim: str = ""
    format: str = ""
    no_audio: bool = False
    reverse: bool = False
    force: bool = False
    workers: int = 1
    output: str = ""
    output_is_dir: bool = False
    show_command: bool = False
    quiet: bool = False

    @field_validator("format")
    @classmethod
    def _strip_format_dot(cls, v: str) -> str:
        return v.strip().lstrip(".")

    @property
    def has_speed_change(self) -> bool:
        return self.speed > 0 and self.speed != 1
