"""
ffmpeg_batch - batch media conversion through ffmpeg.

Translates high-level transform options into ffmpeg flags and runs one
ffmpeg process per input file with bounded parallelism.
"""

__version__ = "0.1.0"

from ffmpeg_batch.dispatcher import convert_all, run_batch
from ffmpeg_batch.exceptions import BatchError, ConversionError, OutputConflictError
from ffmpeg_batch.options import OptionSet

__all__ = [
    "BatchError",
    "ConversionError",
    "OptionSet",
    "OutputConflictError",
    "convert_all",
    "run_batch",
]
