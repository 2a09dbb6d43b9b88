"""Shared types used across ffmpeg_batch modules."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FlagGroup:
    """A single ffmpeg flag and the values joined into its payload."""

    name: str
    values: List[str] = field(default_factory=list)

    def add(self, value: str) -> None:
        self.values.append(value)

    def is_empty(self) -> bool:
        return not self.values

    def to_args(self) -> List[str]:
        """Render as argv entries: the flag, then its comma-joined values."""
        args = [self.name]
        if self.values:
            args.append(",".join(self.values))
        return args


def flatten_groups(groups: List[FlagGroup]) -> List[str]:
    """Render a list of flag groups into one flat argument list."""
    args: List[str] = []
    for group in groups:
        args.extend(group.to_args())
    return args


@dataclass
class Job:
    """Conversion of exactly one input file."""

    input_path: str
    output_path: str
    command: List[str]
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None
