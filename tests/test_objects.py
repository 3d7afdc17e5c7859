"""Blob and commit object tests."""

import json
import pytest
import tempfile
from pathlib import Path
from groot.core.objects import Blob, Commit
from groot.core.index import IndexEntry
from groot.core.hash import hash_object


def test_blob_creation():
    """Test blob creation with data."""
    blob = Blob(b'hello world')
    assert blob.data == b'hello world'
    assert blob.type == 'blob'


def test_blob_serialize():
    """Test blob serialization is the raw content."""
    blob = Blob(b'test data')
    assert blob.serialize() == b'test data'


def test_blob_hash_matches_content_hash():
    blob = Blob(b'hello\n')
    assert blob.hash == hash_object(b'hello\n')


def test_blob_hash_deterministic():
    """Test blob hash determinism."""
    blob1 = Blob(b'same data')
    blob2 = Blob(b'same data')
    assert blob1.compute_hash() == blob2.compute_hash()


def test_blob_from_file():
    """Test blob creation from file."""
    with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        f.write('file content')
        temp_path = f.name
    
    try:
        blob = Blob.from_file(temp_path)
        assert blob.data == b'file content'
    finally:
        Path(temp_path).unlink()


def test_commit_create_fields():
    entries = [IndexEntry('a.txt', 'a' * 40)]
    commit = Commit.create(message='first', files=entries)
    
    assert commit.type == 'commit'
    assert commit.message == 'first'
    assert commit.files == entries
    assert commit.parent is None
    assert commit.timestamp.endswith('+00:00')


def test_commit_serialize_fields(sample_commit):
    record = json.loads(sample_commit.serialize())
    assert list(record) == ['timestamp', 'message', 'files', 'parent']
    assert record['files'] == [{'path': 'test.txt', 'hash': 'a' * 40}]
    assert record['parent'] is None


def test_commit_hash_covers_serialized_bytes(sample_commit):
    assert sample_commit.hash == hash_object(sample_commit.serialize())


def test_commit_roundtrip_keeps_hash(sample_commit):
    data = sample_commit.serialize()
    loaded = Commit.from_bytes(data, sample_commit.hash)
    
    assert loaded.message == sample_commit.message
    assert loaded.files == sample_commit.files
    assert loaded.timestamp == sample_commit.timestamp
    assert loaded.hash == sample_commit.hash


def test_commit_parent_changes_hash(sample_commit):
    child = Commit.create(
        message=sample_commit.message,
        files=sample_commit.files,
        parent='b' * 40,
        timestamp=sample_commit.timestamp,
    )
    assert child.hash != sample_commit.hash


@pytest.mark.parametrize('data', [
    b'not json',
    b'[]',
    b'{"message": "m", "files": [], "parent": null}',
    b'{"timestamp": "t", "message": "m", "files": "x", "parent": null}',
    b'{"timestamp": "t", "message": "m", "files": [{"path": "a"}], "parent": null}',
    b'{"timestamp": "t", "message": "m", "files": [], "parent": 5}',
    b'\xff\xfe',
])
def test_commit_deserialize_rejects_malformed(data):
    with pytest.raises(ValueError):
        Commit.from_bytes(data)


def test_commit_find_file_returns_first_match():
    commit = Commit.create(message='m', files=[
        IndexEntry('a.txt', '1' * 40),
        IndexEntry('b.txt', '2' * 40),
        IndexEntry('a.txt', '3' * 40),
    ])
    assert commit.find_file('a.txt').hash == '1' * 40
    assert commit.find_file('c.txt') is None


def test_blob_text_replaces_undecodable_bytes():
    assert Blob(b'caf\xc3\xa9\n').text() == 'café\n'
    assert Blob(b'bad \xff\n').text() == 'bad \ufffd\n'
