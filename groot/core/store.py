"""Content-addressed object storage for Groot."""

from pathlib import Path
from typing import Iterator

from .errors import NotFoundError
from .hash import HASH_LENGTH, hash_object, is_full_id, is_hex_id
from .objects import GrootObject

# Shortest abbreviated hash accepted by resolve_prefix
MIN_PREFIX_LENGTH = 4


class ObjectStore:
    """
    Write-once key/value store keyed by the SHA-1 of the value.
    
    Objects live in a flat directory, one file per object, named by the
    full 40-character hash and holding the raw bytes. There is no update
    or delete operation.
    """
    
    def __init__(self, objects_dir):
        """
        Args:
            objects_dir: Directory holding the object files
        """
        self.objects_dir = Path(objects_dir)
    
    def init(self) -> None:
        """Create the objects directory. Does nothing if it already exists."""
        self.objects_dir.mkdir(parents=True, exist_ok=True)
    
    def object_path(self, object_id: str) -> Path:
        """
        Get filesystem path for an object.
        
        Args:
            object_id: 40-character SHA-1 hash
            
        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / object_id
    
    def put(self, content: bytes) -> str:
        """
        Store content under its hash.
        
        Writing content that is already stored is a no-op.
        
        Args:
            content: Raw bytes to store
            
        Returns:
            str: SHA-1 hash of the content
        """
        object_id = hash_object(content)
        path = self.object_path(object_id)
        
        if path.exists():
            return object_id
        
        self.init()
        path.write_bytes(content)
        return object_id
    
    def write_object(self, obj: GrootObject) -> str:
        """
        Store a serialized object.
        
        Args:
            obj: Blob or Commit to write
            
        Returns:
            str: SHA-1 hash of the object
        """
        return self.put(obj.serialize())
    
    def get(self, object_id: str) -> bytes:
        """
        Read an object's bytes.
        
        Args:
            object_id: 40-character SHA-1 hash
            
        Returns:
            bytes: Stored content
            
        Raises:
            NotFoundError: If no object with that id exists
        """
        if not is_hex_id(object_id):
            raise NotFoundError(object_id, 'is not a valid object id')
        
        path = self.object_path(object_id)
        if not path.is_file():
            raise NotFoundError(object_id)
        
        return path.read_bytes()
    
    def exists(self, object_id: str) -> bool:
        """Check if object exists in the store."""
        return is_hex_id(object_id) and self.object_path(object_id).is_file()
    
    def resolve_prefix(self, prefix: str) -> str:
        """
        Expand an abbreviated hash to a full object id.
        
        Args:
            prefix: Full hash or a unique prefix of at least four hex digits
            
        Returns:
            str: Full 40-character hash
            
        Raises:
            NotFoundError: If nothing matches, or the prefix is ambiguous
        """
        prefix = prefix.strip().lower()
        
        if len(prefix) == HASH_LENGTH:
            if not self.exists(prefix):
                raise NotFoundError(prefix)
            return prefix
        
        if len(prefix) < MIN_PREFIX_LENGTH or not is_hex_id(prefix):
            raise NotFoundError(prefix, 'is not a valid object id')
        
        matches = [object_id for object_id in self if object_id.startswith(prefix)]
        
        if not matches:
            raise NotFoundError(prefix)
        if len(matches) > 1:
            raise NotFoundError(prefix, f'is ambiguous ({len(matches)} matches)')
        return matches[0]
    
    def __iter__(self) -> Iterator[str]:
        if not self.objects_dir.is_dir():
            return
        for path in sorted(self.objects_dir.iterdir()):
            if path.is_file() and is_full_id(path.name):
                yield path.name
    
    def __len__(self) -> int:
        return sum(1 for _ in self)
    
    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
