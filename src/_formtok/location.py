"""
Mapping of code point offsets, as found in Token.position and
LexError.position, to line and column numbers for diagnostics.
"""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SourceLocation:
    """
    lineno and col_offset are 1-indexed, offset is the 0-indexed
    code point offset the location was computed from.
    """

    lineno: int
    col_offset: int
    offset: int

    def __str__(self):
        return f"{self.lineno}:{self.col_offset}"


def line_starts(source):
    """
    :returns: Sorted numpy array of the offsets at which each line in
        source starts. The first line always starts at 0.
    """
    is_newline = np.fromiter(
        (c == "\n" for c in source), dtype=np.bool_, count=len(source)
    )
    return np.concatenate(([0], np.flatnonzero(is_newline) + 1))


def locate(source, position, starts=None):
    """
    :param source: The tokenized input.
    :param position: A code point offset into source. len(source) is
        allowed as the end of file tokens are placed there.
    :param starts: Precomputed result of line_starts(source), useful when
        locating many positions in the same source.
    :returns: The SourceLocation of position.
    """
    if not 0 <= position <= len(source):
        raise ValueError(
            f"Position {position} is outside of source of length {len(source)}"
        )
    if starts is None:
        starts = line_starts(source)
    line_index = int(np.searchsorted(starts, position, side="right")) - 1
    return SourceLocation(
        lineno=line_index + 1,
        col_offset=position - int(starts[line_index]) + 1,
        offset=position,
    )
