"""Core functionality for Groot.

This module contains the core data structures:
- Groot objects (Blob, Commit)
- Content-addressed object store
- Index/staging area
- HEAD pointer and commit history
- Repository management
- Configuration management
- Hashing utilities

For diffing, see groot.operations
"""

from groot.core.errors import (
    GrootError,
    NotARepositoryError,
    AlreadyInitializedError,
    NotFoundError,
    CorruptHistoryError,
    CorruptIndexError,
)
from groot.core.objects import GrootObject, Blob, Commit
from groot.core.store import ObjectStore
from groot.core.index import Index, IndexEntry
from groot.core.refs import Head
from groot.core.graph import CommitGraph
from groot.core.repository import Repository, CommitShow
from groot.core.hash import hash_object
from groot.core.config import Config

__all__ = [
    'GrootError',
    'NotARepositoryError',
    'AlreadyInitializedError',
    'NotFoundError',
    'CorruptHistoryError',
    'CorruptIndexError',
    'GrootObject',
    'Blob',
    'Commit',
    'ObjectStore',
    'Index',
    'IndexEntry',
    'Head',
    'CommitGraph',
    'Repository',
    'CommitShow',
    'Config',
    'hash_object',
]
