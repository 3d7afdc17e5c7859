"""Exceptions raised by the Groot core."""


class GrootError(Exception):
    """Base class for all Groot errors."""


class NotARepositoryError(GrootError):
    """No .groot directory was found."""

    def __init__(self, path):
        super().__init__(f"Not a groot repository: {path}")
        self.path = path


class AlreadyInitializedError(GrootError):
    """Init was run on a directory that already holds a repository."""

    def __init__(self, path):
        super().__init__(f"Repository already initialized at {path}")
        self.path = path


class NotFoundError(GrootError):
    """An object or commit hash is not present in the object store."""

    def __init__(self, object_id: str, reason: str = 'not found'):
        super().__init__(f"Object {object_id} {reason}")
        self.object_id = object_id


class CorruptHistoryError(GrootError):
    """
    Commit history cannot be followed.
    
    Raised when a parent hash does not resolve, or when a stored commit
    record is not well formed.
    """

    def __init__(self, commit_hash: str, message: str):
        super().__init__(f"Corrupt history at {commit_hash}: {message}")
        self.commit_hash = commit_hash


class CorruptIndexError(GrootError):
    """The staging index file could not be decoded."""
