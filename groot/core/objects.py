"""Groot objects: blobs and commits."""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from .hash import hash_object
from .index import IndexEntry


class GrootObject(ABC):
    """Base class for all Groot objects."""
    
    def __init__(self):
        self._hash: Optional[str] = None
    
    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.
        
        Returns:
            bytes: Serialized object data
        """
        pass
    
    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.
        
        Args:
            data: Serialized object data
        """
        pass
    
    @property
    def type(self) -> str:
        """
        Return object type name.
        
        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()
    
    def compute_hash(self) -> str:
        """
        Compute and cache object hash.
        
        Objects are hashed over exactly the bytes that get stored, with no
        type header, so a blob's id is the SHA-1 of the file content.
        
        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash
    
    @property
    def hash(self) -> str:
        """
        Get object hash.
        
        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(GrootObject):
    """
    Represents file content.
    
    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """
    
    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''
    
    def serialize(self) -> bytes:
        return self.data
    
    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None
    
    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.
        
        Args:
            filepath: Path to file
            
        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())
    
    def text(self) -> str:
        """Decode content as UTF-8, replacing undecodable bytes."""
        return self.data.decode('utf-8', errors='replace')
    
    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Commit(GrootObject):
    """
    Represents a commit.
    
    A commit captures:
    - ISO-8601 timestamp of creation
    - Commit message
    - The staged files, in the order they were added
    - The parent commit hash (None for the first commit)
    
    Serialized as a JSON object. The commit's own hash is never part of
    the record; it is the SHA-1 of the serialized bytes.
    """
    
    FIELDS = ('timestamp', 'message', 'files', 'parent')
    
    def __init__(self):
        super().__init__()
        self.timestamp: str = ''
        self.message: str = ''
        self.files: List[IndexEntry] = []
        self.parent: Optional[str] = None
    
    def to_dict(self) -> dict:
        return {
            'timestamp': self.timestamp,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
            'parent': self.parent,
        }
    
    def serialize(self) -> bytes:
        """
        Serialize commit to compact JSON.
        
        Returns:
            bytes: UTF-8 encoded JSON
        """
        return json.dumps(self.to_dict(), separators=(',', ':')).encode('utf-8')
    
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON.
        
        Args:
            data: Serialized commit data
            
        Raises:
            ValueError: If data is not a well-formed commit record
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"not a commit record ({e})")
        
        if not isinstance(record, dict):
            raise ValueError("commit record must be a JSON object")
        
        missing = [field for field in self.FIELDS if field not in record]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        
        if not isinstance(record['timestamp'], str):
            raise ValueError("timestamp must be a string")
        if not isinstance(record['message'], str):
            raise ValueError("message must be a string")
        if not isinstance(record['files'], list):
            raise ValueError("files must be a list")
        parent = record['parent']
        if parent is not None and not isinstance(parent, str):
            raise ValueError("parent must be a string or null")
        
        self.timestamp = record['timestamp']
        self.message = record['message']
        self.files = [IndexEntry.from_dict(item) for item in record['files']]
        # An empty parent is treated the same as null
        self.parent = parent or None
        self._hash = None
    
    @classmethod
    def create(
        cls,
        message: str,
        files: List[IndexEntry],
        parent: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.
        
        Args:
            message: Commit message
            files: Staged entries captured by this commit
            parent: Hash of the previous commit, or None for the first one
            timestamp: ISO-8601 timestamp (defaults to current UTC time)
            
        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.files = list(files)
        commit.parent = parent or None
        
        if timestamp is None:
            timestamp = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
        commit.timestamp = timestamp
        
        return commit
    
    @classmethod
    def from_bytes(cls, data: bytes, commit_hash: Optional[str] = None) -> 'Commit':
        """
        Build a commit from stored bytes.
        
        Args:
            data: Serialized commit
            commit_hash: Id the data was stored under, kept as the commit's hash
        """
        commit = cls()
        commit.deserialize(data)
        if commit_hash is not None:
            commit._hash = commit_hash
        return commit
    
    def find_file(self, path: str) -> Optional[IndexEntry]:
        """Return the first file entry recorded for path, if any."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None
    
    def __repr__(self) -> str:
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
