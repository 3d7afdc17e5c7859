"""Line-level diff engine for comparing blobs and commits."""

from dataclasses import dataclass
from difflib import SequenceMatcher
from enum import Enum
from typing import List, Optional

from groot.core.objects import Blob, Commit


class SegmentKind(Enum):
    """Classification of a run of lines in a diff."""
    EQUAL = 'equal'
    ADDED = 'added'
    REMOVED = 'removed'


@dataclass(frozen=True)
class DiffSegment:
    """A run of consecutive lines sharing one classification."""
    kind: SegmentKind
    text: str
    
    @property
    def lines(self) -> List[str]:
        return self.text.splitlines(keepends=True)


def diff_lines(old_text: str, new_text: str) -> List[DiffSegment]:
    """
    Compute a line-level edit script between two texts.
    
    Lines keep their line endings, so joining segment texts reproduces
    the inputs exactly. Where the texts diverge, removed lines come
    before the added lines that replace them.
    
    Args:
        old_text: Previous version
        new_text: Current version
    
    Returns:
        Segments in document order of the new text
    """
    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)
    
    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    segments: List[DiffSegment] = []
    
    def emit(kind: SegmentKind, lines: List[str]):
        if not lines:
            return
        text = ''.join(lines)
        if segments and segments[-1].kind is kind:
            segments[-1] = DiffSegment(kind, segments[-1].text + text)
        else:
            segments.append(DiffSegment(kind, text))
    
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            emit(SegmentKind.EQUAL, new_lines[j1:j2])
        elif tag == 'delete':
            emit(SegmentKind.REMOVED, old_lines[i1:i2])
        elif tag == 'insert':
            emit(SegmentKind.ADDED, new_lines[j1:j2])
        else:
            emit(SegmentKind.REMOVED, old_lines[i1:i2])
            emit(SegmentKind.ADDED, new_lines[j1:j2])
    
    return segments


def old_text(segments: List[DiffSegment]) -> str:
    """Rebuild the old text from a diff."""
    return ''.join(s.text for s in segments if s.kind is not SegmentKind.ADDED)


def new_text(segments: List[DiffSegment]) -> str:
    """Rebuild the new text from a diff."""
    return ''.join(s.text for s in segments if s.kind is not SegmentKind.REMOVED)


class FileDiff:
    """Represents the diff for a single file between two commits."""
    
    def __init__(self, path: str, old_content: Optional[bytes], new_content: bytes):
        self.path = path
        self.old_content = old_content
        self.new_content = new_content
        self.is_new = old_content is None
        self.segments: List[DiffSegment] = []
    
    def compute_diff(self):
        """Compute segments for this file. New files get no diff."""
        if self.is_new:
            self.segments = []
            return
        
        self.segments = diff_lines(
            Blob(self.old_content).text(),
            Blob(self.new_content).text(),
        )
    
    @property
    def is_unchanged(self) -> bool:
        return not self.is_new and all(s.kind is SegmentKind.EQUAL for s in self.segments)
    
    @property
    def additions(self) -> int:
        return sum(len(s.lines) for s in self.segments if s.kind is SegmentKind.ADDED)
    
    @property
    def deletions(self) -> int:
        return sum(len(s.lines) for s in self.segments if s.kind is SegmentKind.REMOVED)
    
    def __repr__(self) -> str:
        status = 'new' if self.is_new else f'+{self.additions} -{self.deletions}'
        return f"FileDiff({self.path}, {status})"


class DiffEngine:
    """
    Engine for computing diffs between blobs and commits.
    
    Reads blob content from the object store and classifies each line
    as unchanged, added or removed. Rendering is left to callers.
    """
    
    def __init__(self, store):
        """
        Args:
            store: ObjectStore holding the blobs
        """
        self.store = store
    
    def diff_blobs(self, path: str, old_hash: Optional[str], new_hash: str) -> FileDiff:
        """
        Compute diff between two stored blobs.
        
        Args:
            path: File path
            old_hash: Old blob hash (None for new files)
            new_hash: New blob hash
        
        Returns:
            FileDiff object
        """
        old_content = self.store.get(old_hash) if old_hash is not None else None
        new_content = self.store.get(new_hash)
        
        file_diff = FileDiff(path, old_content, new_content)
        file_diff.compute_diff()
        return file_diff
    
    def diff_commits(self, parent: Commit, commit: Commit) -> List[FileDiff]:
        """
        Compute diff between a commit and its parent.
        
        Every file entry of the commit is compared, in order, with the first
        entry for the same path in the parent. Entries with no counterpart
        in the parent are reported as new files.
        
        Args:
            parent: Parent commit
            commit: Commit to compare against its parent
        
        Returns:
            List of FileDiff objects, one per file entry in commit
        """
        diffs = []
        
        for entry in commit.files:
            previous = parent.find_file(entry.path)
            old_hash = previous.hash if previous is not None else None
            diffs.append(self.diff_blobs(entry.path, old_hash, entry.hash))
        
        return diffs
