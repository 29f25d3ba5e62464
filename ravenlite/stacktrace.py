"""Stack frame extraction from Python exceptions."""

from __future__ import annotations

import linecache
import os
from types import CodeType, TracebackType

from ravenlite.types import StackFrame


def _column(code: CodeType, lasti: int) -> int | None:
    """1-based column of the instruction at ``lasti``, if the interpreter tracks it."""
    positions = getattr(code, "co_positions", None)
    if positions is None or lasti < 0:
        return None
    for index, (_, _, col, _) in enumerate(positions()):
        if index == lasti // 2:
            return None if col is None else col + 1
    return None


def _frame_from_tb(tb: TracebackType) -> StackFrame:
    frame = tb.tb_frame
    code = frame.f_code
    filename = code.co_filename
    lineno = tb.tb_lineno

    line = linecache.getline(filename, lineno, frame.f_globals).strip()

    return StackFrame(
        filename=filename,
        abs_path=os.path.abspath(filename) if filename and not filename.startswith("<") else filename,
        lineno=lineno,
        colno=_column(code, tb.tb_lasti),
        context_line=line or None,
        function=code.co_name,
    )


def parse_stack(error: BaseException) -> list[StackFrame]:
    """
    Parse the traceback attached to ``error``.

    Frames come back most recent call first, the order a stack parser
    yields them. An exception that was never raised has no frames.
    """
    frames: list[StackFrame] = []

    tb = error.__traceback__
    while tb is not None:
        frames.append(_frame_from_tb(tb))
        tb = tb.tb_next

    return list(reversed(frames))
