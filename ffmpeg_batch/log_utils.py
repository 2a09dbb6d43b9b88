"""
Logging setup for peg.

Input file names come straight from the command line, so a name holding a
newline or other control character could forge log lines. Record arguments
are escaped before formatting by a LogRecord factory installed once at
startup.
"""

import logging
import os
import sys

from ffmpeg_batch.config import set_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# C0 control characters and DEL, rendered as visible escapes
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in range(0x20)}
_CONTROL_ESCAPES.update({
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    0x7F: "\\x7f",
})

_base_factory = None


def escape_control(value):
    """Escape control characters in str and path arguments; pass others through."""
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, str):
        return value.translate(_CONTROL_ESCAPES)
    return value


def _escaping_record_factory(*args, **kwargs):
    record = (_base_factory or logging.LogRecord)(*args, **kwargs)
    if isinstance(record.args, dict):
        record.args = {k: escape_control(v) for k, v in record.args.items()}
    elif isinstance(record.args, tuple):
        record.args = tuple(escape_control(a) for a in record.args)
    return record


def install_safe_logging() -> None:
    """Wrap the current LogRecord factory with argument escaping.

    Installing twice does not wrap twice.
    """
    global _base_factory

    current = logging.getLogRecordFactory()
    if current is _escaping_record_factory:
        return
    _base_factory = current
    logging.setLogRecordFactory(_escaping_record_factory)


def configure_logging(level: str = "WARNING") -> None:
    """Install escaping and a single stderr handler, then apply ``level``.

    Calling this again only updates the level.
    """
    install_safe_logging()
    root = logging.getLogger()
    if not any(getattr(h, "_peg_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._peg_handler = True
        root.addHandler(handler)
    set_log_level(level)
