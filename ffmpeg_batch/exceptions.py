"""Exception types raised by ffmpeg_batch."""

from typing import List


class PegError(Exception):
    """Base class for all ffmpeg_batch errors."""


class OutputConflictError(PegError):
    """Raised when a single output file is given for more than one input."""


class OutputTargetError(PegError):
    """Raised when the output target cannot be inspected or created."""


class ConversionError(PegError):
    """Raised when one ffmpeg invocation fails or cannot be spawned."""


class BatchError(PegError):
    """Aggregate of every distinct per-file failure in a batch.

    The message is the sorted, de-duplicated failure messages joined by
    newlines. ``messages`` holds the same lines as a list.
    """

    def __init__(self, messages: List[str]) -> None:
        self.messages = sorted(messages)
        super().__init__("\n".join(self.messages))
