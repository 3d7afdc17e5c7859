"""Shared pytest fixtures for Groot tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from groot.core.repository import Repository
from groot.core.objects import Blob, Commit
from groot.core.index import IndexEntry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def sample_commit():
    """Sample commit object with a fixed timestamp."""
    return Commit.create(
        message="Test commit",
        files=[IndexEntry(path='test.txt', hash='a' * 40)],
        parent=None,
        timestamp='2024-01-01T00:00:00.000+00:00',
    )


def _write_file(repo, name, content):
    """Write a text file inside the repository's work tree."""
    path = repo.work_tree / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def repo_with_commits(repo):
    """
    Repository with two commits:
    - 'first' adds a.txt = "hello\\n"
    - 'second' changes a.txt to "hello\\nworld\\n" and adds b.txt
    """
    _write_file(repo, 'a.txt', 'hello\n')
    repo.add('a.txt')
    repo.first_hash = repo.commit('first')
    
    _write_file(repo, 'a.txt', 'hello\nworld\n')
    _write_file(repo, 'b.txt', 'new file\n')
    repo.add('a.txt')
    repo.add('b.txt')
    repo.second_hash = repo.commit('second')
    
    return repo


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Run with the repository's work tree as the current directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo


@pytest.fixture
def write_file():
    """Helper that writes a text file inside a repository's work tree."""
    return _write_file
