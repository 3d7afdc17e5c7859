"""Repository management for Groot."""

from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import Config
from .errors import (
    AlreadyInitializedError,
    CorruptHistoryError,
    NotARepositoryError,
    NotFoundError,
)
from .graph import CommitGraph
from .index import Index, IndexEntry
from .objects import Blob, Commit
from .refs import Head
from .store import ObjectStore

GROOT_DIR = '.groot'


@dataclass
class CommitShow:
    """A commit together with the changes it made relative to its parent."""
    commit_hash: str
    commit: Commit
    parent_hash: Optional[str] = None
    diffs: list = field(default_factory=list)
    
    @property
    def has_parent(self) -> bool:
        return self.parent_hash is not None


class Repository:
    """
    Represents a Groot repository.
    
    A repository owns the .groot directory and the components stored in it:
    the object store, the staging index, the HEAD pointer and the config.
    All operations are synchronous and assume a single writer.
    """
    
    def __init__(self, path: str = '.'):
        """
        Initialize repository.
        
        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.groot_dir = self.work_tree / GROOT_DIR
        self.objects_dir = self.groot_dir / 'objects'
        self.head_file = self.groot_dir / 'HEAD'
        self.index_file = self.groot_dir / 'index'
        self.config_file = self.groot_dir / 'config'
        
        self.store = ObjectStore(self.objects_dir)
        self.index = Index(self.index_file)
        self.head = Head(self.head_file)
        self.graph = CommitGraph(self.store, self.head)
        self.config = Config(self.config_file)
        
        self._diff_engine = None
    
    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from groot.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self.store)
        return self._diff_engine
    
    def init(self, exist_ok: bool = False) -> 'Repository':
        """
        Initialize a new repository.
        
        Creates the .groot directory structure:
        .groot/
        ├── objects/       # Object database
        ├── HEAD           # Latest commit hash (empty until first commit)
        ├── index          # Staging area
        └── config         # Repository configuration
        
        Existing files are never overwritten, so running init again is
        safe and only fills in whatever is missing.
        
        Args:
            exist_ok: Do not raise if the repository already exists
        
        Returns:
            Repository: self for method chaining
            
        Raises:
            AlreadyInitializedError: If .groot existed and exist_ok is False
        """
        existed = self.is_initialized()
        
        self.groot_dir.mkdir(parents=True, exist_ok=True)
        self.store.init()
        self.head.init()
        if not self.index_file.exists():
            self.index.clear()
        self.config.init()
        
        if existed and not exist_ok:
            raise AlreadyInitializedError(self.groot_dir)
        
        return self
    
    def is_initialized(self) -> bool:
        return self.groot_dir.is_dir()
    
    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.
        
        Searches from the given path upwards until it finds a .groot
        directory or reaches the filesystem root.
        
        Args:
            path: Starting path for search
            
        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()
        
        while True:
            if (current / GROOT_DIR).is_dir():
                return cls(str(current))
            
            # Reached filesystem root
            if current == current.parent:
                return None
            
            current = current.parent
    
    @classmethod
    def open(cls, path: str = '.') -> 'Repository':
        """
        Like find_repository, but raises when no repository is found.
        
        Raises:
            NotARepositoryError: If no .groot directory exists at or above path
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise NotARepositoryError(Path(path).resolve())
        return repo
    
    def relative_path(self, file_path: Path, original: str) -> str:
        """
        Path recorded in the index for a file.
        
        Files inside the work tree are recorded relative to it with forward
        slashes; anything else keeps the path it was given as.
        """
        try:
            return file_path.resolve().relative_to(self.work_tree).as_posix()
        except ValueError:
            return Path(original).as_posix()
    
    def add(self, path: str) -> IndexEntry:
        """
        Stage a file for commit.
        
        The content is stored as a blob, then an entry is appended to the
        index. Adding the same path twice stages it twice.
        
        Args:
            path: File path, absolute or relative to the work tree
            
        Returns:
            IndexEntry: The staged entry
            
        Raises:
            FileNotFoundError: If the file does not exist
            IsADirectoryError: If path is a directory
        """
        file_path = Path(path)
        if not file_path.is_absolute():
            file_path = self.work_tree / file_path
        
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        
        if file_path.is_dir():
            raise IsADirectoryError(f"Not a file: {path}")
        
        blob = Blob.from_file(str(file_path))
        blob_hash = self.store.write_object(blob)
        
        entry = IndexEntry(path=self.relative_path(file_path, path), hash=blob_hash)
        self.index.append(entry)
        return entry
    
    def staged(self) -> List[IndexEntry]:
        """Entries waiting for the next commit."""
        return self.index.load()
    
    def commit(self, message: str) -> Optional[str]:
        """
        Record the staged files as a new commit.
        
        The commit object is written before HEAD moves, and the index is
        cleared last. An interrupted commit can leave a stale index but
        never a HEAD pointing at a missing commit.
        
        Args:
            message: Commit message
            
        Returns:
            str: Hash of the new commit, or None if nothing was staged and
                core.allowemptycommits is off
        """
        entries = self.index.load()
        if not entries and not self.config.allow_empty_commits:
            return None
        
        parent = self.head.resolve()
        commit = self.graph.create_commit(message, entries, parent)
        commit_hash = self.graph.persist(commit)
        
        self.head.update(commit_hash)
        self.index.clear()
        
        return commit_hash
    
    def history(self, max_count: Optional[int] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Walk commits from HEAD, most recent first.
        
        With max_count, the walk stops once that many commits have been
        produced, without reading the next parent.
        """
        return islice(self.graph.traverse_from_head(), max_count)
    
    def log(self, max_count: Optional[int] = None) -> Iterator[str]:
        """
        Render commit history, most recent first.
        
        Each commit becomes one text block with its hash, timestamp and
        indented message.
        
        Args:
            max_count: Stop after this many commits
            
        Raises:
            CorruptHistoryError: When history breaks, after the blocks
                before the break have been produced
        """
        for commit_hash, commit in self.history(max_count):
            yield format_commit(commit_hash, commit)
    
    def resolve_commit(self, commit_ref: str) -> str:
        """
        Turn a full or abbreviated hash into a full hash.
        
        'HEAD' resolves to the latest commit.
        
        Raises:
            NotFoundError: If nothing (or more than one object) matches
        """
        if commit_ref == 'HEAD':
            head = self.head.resolve()
            if head is None:
                raise NotFoundError('HEAD', 'has no commits yet')
            return head
        return self.store.resolve_prefix(commit_ref)
    
    def show(self, commit_ref: str) -> CommitShow:
        """
        Load a commit and diff it against its parent.
        
        Args:
            commit_ref: Full or abbreviated commit hash, or 'HEAD'
            
        Returns:
            CommitShow: For a commit with no parent, diffs is empty and
                has_parent is False
            
        Raises:
            NotFoundError: If the commit does not exist
            CorruptHistoryError: If the commit or its parent is unreadable
        """
        commit_hash = self.resolve_commit(commit_ref)
        commit = self.graph.load(commit_hash)
        
        result = CommitShow(commit_hash=commit_hash, commit=commit)
        if commit.parent is None:
            return result
        
        try:
            parent = self.graph.load(commit.parent)
        except NotFoundError:
            raise CorruptHistoryError(
                commit_hash, f"parent {commit.parent} does not resolve"
            )
        
        result.parent_hash = commit.parent
        result.diffs = self.diff.diff_commits(parent, commit)
        return result
    
    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"


def format_commit(commit_hash: str, commit: Commit) -> str:
    """Plain-text log entry for one commit."""
    lines = [f"commit {commit_hash}", f"Date:   {commit.timestamp}", ""]
    lines.extend(f"    {line}" for line in commit.message.split('\n'))
    return '\n'.join(lines)
