"""Commit history: building, storing and walking commits."""

from typing import Iterator, List, Optional, Tuple

from .errors import CorruptHistoryError, NotFoundError
from .index import IndexEntry
from .objects import Commit
from .refs import Head
from .store import ObjectStore


class CommitGraph:
    """
    Linear, hash-addressed commit history.
    
    Each commit points at its parent; the chain ends at the first commit,
    whose parent is None. Commits share the object store with blobs.
    """
    
    def __init__(self, store: ObjectStore, head: Head):
        """
        Args:
            store: Object store commits are written to
            head: HEAD pointer traversal starts from
        """
        self.store = store
        self.head = head
    
    def create_commit(
        self,
        message: str,
        entries: List[IndexEntry],
        parent: Optional[str] = None
    ) -> Commit:
        """
        Assemble a commit record stamped with the current time.
        
        Args:
            message: Commit message
            entries: Staged index entries
            parent: Current HEAD hash, or None for the first commit
            
        Returns:
            Commit: Unsaved commit
        """
        return Commit.create(message=message, files=entries, parent=parent)
    
    def persist(self, commit: Commit) -> str:
        """
        Write a commit to the object store.
        
        Args:
            commit: Commit to write
            
        Returns:
            str: Hash of the serialized commit
        """
        return self.store.write_object(commit)
    
    def load(self, commit_hash: str) -> Commit:
        """
        Read a commit from the object store.
        
        Args:
            commit_hash: Full commit hash
            
        Returns:
            Commit: Decoded commit whose hash is commit_hash
            
        Raises:
            NotFoundError: If no object exists with that hash
            CorruptHistoryError: If the object is not a commit record
        """
        data = self.store.get(commit_hash)
        try:
            return Commit.from_bytes(data, commit_hash)
        except ValueError as e:
            raise CorruptHistoryError(commit_hash, str(e))
    
    def traverse_from_head(self) -> Iterator[Tuple[str, Commit]]:
        """
        Walk history from HEAD back to the first commit.
        
        Yields (hash, commit) pairs, most recent first. HEAD is read when
        iteration starts, so every call walks the current history.
        
        Raises:
            CorruptHistoryError: If a parent hash does not resolve. Commits
                yielded before the break stay valid.
        """
        commit_hash = self.head.resolve()
        child_hash = None
        
        while commit_hash is not None:
            try:
                commit = self.load(commit_hash)
            except NotFoundError:
                if child_hash is None:
                    raise CorruptHistoryError(commit_hash, "HEAD points to a missing commit")
                raise CorruptHistoryError(
                    child_hash, f"parent {commit_hash} does not resolve"
                )
            
            yield commit_hash, commit
            child_hash, commit_hash = commit_hash, commit.parent
    
    def __iter__(self) -> Iterator[Commit]:
        for _, commit in self.traverse_from_head():
            yield commit
