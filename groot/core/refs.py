"""HEAD reference management for Groot."""

import os
from pathlib import Path
from typing import Optional


class Head:
    """
    Manages the HEAD pointer.
    
    HEAD is a single file holding the hash of the most recent commit.
    An empty or missing file means no commit has been made yet. There
    are no branches, so HEAD never holds a symbolic reference.
    """
    
    def __init__(self, head_file):
        """
        Args:
            head_file: Path to the HEAD file
        """
        self.head_file = Path(head_file)
    
    def init(self) -> None:
        """Create an empty HEAD file unless one already exists."""
        if not self.head_file.exists():
            self.head_file.write_text('')
    
    def resolve(self) -> Optional[str]:
        """
        Get the commit hash HEAD points to.
        
        Returns:
            Commit hash, or None if there are no commits yet
        """
        if not self.head_file.exists():
            return None
        
        content = self.head_file.read_text().strip()
        return content or None
    
    def update(self, commit_hash: str) -> None:
        """
        Point HEAD at a commit.
        
        The new value is written to HEAD.lock and renamed over HEAD, so
        readers see either the old hash or the new one, never a
        truncated file.
        
        Args:
            commit_hash: Hash of a commit already written to the store
        """
        lock_file = self.head_file.with_name(self.head_file.name + '.lock')
        lock_file.write_text(commit_hash + '\n')
        os.replace(lock_file, self.head_file)
    
    def __repr__(self) -> str:
        return f"Head({self.resolve() or 'unborn'})"
