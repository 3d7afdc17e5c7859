"""Index (staging area) implementation."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .errors import CorruptIndexError


@dataclass
class IndexEntry:
    """
    Represents a single entry in the index.
    
    Maps a file path to the hash of the blob holding its content.
    """
    path: str
    hash: str
    
    def to_dict(self) -> dict:
        return {'path': self.path, 'hash': self.hash}
    
    @classmethod
    def from_dict(cls, data) -> 'IndexEntry':
        """
        Build an entry from a decoded JSON object.
        
        Raises:
            ValueError: If path or hash is missing or not a string
        """
        if not isinstance(data, dict):
            raise ValueError(f"entry must be an object, got {type(data).__name__}")
        path = data.get('path')
        obj_hash = data.get('hash')
        if not isinstance(path, str) or not isinstance(obj_hash, str):
            raise ValueError(f"entry needs string 'path' and 'hash': {data!r}")
        return cls(path=path, hash=obj_hash)
    
    def __repr__(self) -> str:
        return f"IndexEntry({self.hash[:7]} {self.path})"


class Index:
    """
    Groot index (staging area) implementation.
    
    The index is an ordered list of entries waiting for the next commit,
    stored as a JSON array. Entries are kept in the order they were added
    and the same path may appear more than once.
    
    Every mutation is a read-modify-write of the whole file. There is no
    locking; a single writer per repository is assumed.
    """
    
    def __init__(self, index_path):
        """
        Args:
            index_path: Path to the index file
        """
        self.index_path = Path(index_path)
    
    def load(self) -> List[IndexEntry]:
        """
        Read staged entries from disk.
        
        Returns:
            Entries in add order; empty if nothing is staged
            
        Raises:
            CorruptIndexError: If the file is not a JSON array of entries
        """
        if not self.index_path.exists():
            return []
        
        raw = self.index_path.read_bytes()
        
        try:
            content = raw.decode('utf-8')
            if not content.strip():
                return []
            data = json.loads(content)
        except UnicodeDecodeError as e:
            raise CorruptIndexError(f"Index is not valid UTF-8: {e}")
        except json.JSONDecodeError as e:
            raise CorruptIndexError(f"Index is not valid JSON: {e}")
        
        if not isinstance(data, list):
            raise CorruptIndexError("Index must contain a JSON array")
        
        try:
            return [IndexEntry.from_dict(item) for item in data]
        except ValueError as e:
            raise CorruptIndexError(f"Invalid index entry: {e}")
    
    def append(self, entry: IndexEntry) -> None:
        """Add entry to the end of the staged sequence."""
        entries = self.load()
        entries.append(entry)
        self._write(entries)
    
    def clear(self) -> None:
        """Reset the index to an empty sequence."""
        self._write([])
    
    def _write(self, entries: List[IndexEntry]) -> None:
        data = [entry.to_dict() for entry in entries]
        self.index_path.write_text(json.dumps(data), encoding='utf-8')
    
    def __len__(self) -> int:
        return len(self.load())
    
    def __repr__(self) -> str:
        return f"Index(path={self.index_path})"
