"""Operations module for higher-level Groot operations.

Currently holds the line-level diff engine used by show.
"""

from groot.operations.diff import (
    DiffEngine,
    DiffSegment,
    FileDiff,
    SegmentKind,
    diff_lines,
)

__all__ = [
    'DiffEngine', 'DiffSegment', 'FileDiff', 'SegmentKind', 'diff_lines',
]
