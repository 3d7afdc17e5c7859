"""Groot - a minimal content-addressable version control engine."""

__version__ = '0.1.0'

from groot.core.repository import Repository
from groot.core.objects import GrootObject, Blob, Commit

__all__ = [
    'Repository',
    'GrootObject',
    'Blob',
    'Commit',
]
