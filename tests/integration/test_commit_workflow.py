"""Integration tests for the add / commit / log / show workflow."""

import hashlib
import json
import pytest
from groot.core.errors import CorruptHistoryError, NotFoundError
from groot.core.index import IndexEntry
from groot.operations.diff import DiffSegment, SegmentKind


def test_add_stores_blob_and_stages_entry(repo, write_file):
    write_file(repo, 'a.txt', 'hello\n')
    
    entry = repo.add('a.txt')
    
    expected = hashlib.sha1(b'hello\n').hexdigest()
    assert entry == IndexEntry('a.txt', expected)
    assert list(repo.store) == [expected]
    assert repo.store.get(expected) == b'hello\n'
    assert repo.staged() == [IndexEntry('a.txt', expected)]


def test_add_missing_file(repo):
    with pytest.raises(FileNotFoundError):
        repo.add('missing.txt')
    
    assert list(repo.store) == []
    assert repo.staged() == []


def test_add_directory_rejected(repo):
    (repo.work_tree / 'sub').mkdir()
    with pytest.raises(IsADirectoryError):
        repo.add('sub')


def test_add_absolute_path_recorded_relative(repo, write_file):
    path = write_file(repo, 'dir/nested.txt', 'x\n')
    entry = repo.add(str(path))
    assert entry.path == 'dir/nested.txt'


def test_add_identical_content_deduplicates(repo, write_file):
    write_file(repo, 'a.txt', 'same\n')
    write_file(repo, 'b.txt', 'same\n')
    repo.add('a.txt')
    repo.add('b.txt')
    
    assert len(repo.store) == 1
    assert [e.path for e in repo.staged()] == ['a.txt', 'b.txt']


def test_add_same_path_twice_keeps_both(repo, write_file):
    write_file(repo, 'a.txt', 'one\n')
    repo.add('a.txt')
    write_file(repo, 'a.txt', 'two\n')
    repo.add('a.txt')
    
    commit_hash = repo.commit('twice')
    commit = repo.graph.load(commit_hash)
    assert [e.path for e in commit.files] == ['a.txt', 'a.txt']


def test_first_commit(repo, write_file):
    write_file(repo, 'a.txt', 'hello\n')
    entry = repo.add('a.txt')
    
    commit_hash = repo.commit('first')
    
    assert repo.head.resolve() == commit_hash
    assert repo.staged() == []
    commit = repo.graph.load(commit_hash)
    assert commit.parent is None
    assert commit.message == 'first'
    assert commit.files == [entry]


def test_commit_record_on_disk(repo, write_file):
    write_file(repo, 'a.txt', 'hello\n')
    repo.add('a.txt')
    commit_hash = repo.commit('first')
    
    raw = repo.store.object_path(commit_hash).read_bytes()
    assert hashlib.sha1(raw).hexdigest() == commit_hash
    record = json.loads(raw)
    assert set(record) == {'timestamp', 'message', 'files', 'parent'}
    assert commit_hash not in raw.decode()


def test_second_commit_links_parent(repo_with_commits):
    second = repo_with_commits.graph.load(repo_with_commits.second_hash)
    assert second.parent == repo_with_commits.first_hash


def test_empty_commit_refused_by_default(repo):
    assert repo.commit('nothing') is None
    assert repo.head.resolve() is None
    assert list(repo.store) == []


def test_empty_commit_allowed_by_config(repo):
    repo.config.set('core', 'allowemptycommits', 'true')
    commit_hash = repo.commit('empty')
    
    assert commit_hash is not None
    assert repo.graph.load(commit_hash).files == []


def test_history_length(repo, write_file):
    for i in range(4):
        write_file(repo, 'a.txt', f'version {i}\n')
        repo.add('a.txt')
        repo.commit(f'commit {i}')
    
    assert len(list(repo.history())) == 4


def test_log_renders_newest_first(repo_with_commits):
    blocks = list(repo_with_commits.log())
    
    assert len(blocks) == 2
    assert blocks[0].startswith(f'commit {repo_with_commits.second_hash}\nDate:   ')
    assert blocks[0].endswith('\n    second')
    assert blocks[1].startswith(f'commit {repo_with_commits.first_hash}')


def test_log_max_count(repo_with_commits):
    assert len(list(repo_with_commits.log(max_count=1))) == 1


def test_log_reports_partial_history_before_corruption(repo_with_commits):
    repo_with_commits.store.object_path(repo_with_commits.first_hash).unlink()
    
    blocks = []
    with pytest.raises(CorruptHistoryError):
        for block in repo_with_commits.log():
            blocks.append(block)
    
    assert len(blocks) == 1


def test_show_modified_and_new_file(repo_with_commits):
    result = repo_with_commits.show(repo_with_commits.second_hash)
    
    assert result.has_parent
    assert result.parent_hash == repo_with_commits.first_hash
    a_diff, b_diff = result.diffs
    assert a_diff.path == 'a.txt'
    assert a_diff.segments == [
        DiffSegment(SegmentKind.EQUAL, 'hello\n'),
        DiffSegment(SegmentKind.ADDED, 'world\n'),
    ]
    assert b_diff.path == 'b.txt'
    assert b_diff.is_new
    assert b_diff.segments == []


def test_show_root_commit_has_no_prior_version(repo_with_commits):
    result = repo_with_commits.show(repo_with_commits.first_hash)
    assert not result.has_parent
    assert result.diffs == []


def test_show_abbreviated_hash_and_head(repo_with_commits):
    short = repo_with_commits.second_hash[:8]
    assert repo_with_commits.show(short).commit_hash == repo_with_commits.second_hash
    assert repo_with_commits.show('HEAD').commit_hash == repo_with_commits.second_hash


def test_show_missing_commit(repo_with_commits):
    with pytest.raises(NotFoundError):
        repo_with_commits.show('0' * 40)


def test_show_head_without_commits(repo):
    with pytest.raises(NotFoundError):
        repo.show('HEAD')


def test_show_missing_parent(repo_with_commits):
    repo_with_commits.store.object_path(repo_with_commits.first_hash).unlink()
    with pytest.raises(CorruptHistoryError):
        repo_with_commits.show(repo_with_commits.second_hash)


def test_commit_writes_object_before_moving_head(repo, monkeypatch, write_file):
    write_file(repo, 'a.txt', 'hello\n')
    repo.add('a.txt')
    
    def fail(_commit_hash):
        raise OSError("disk full")
    monkeypatch.setattr(repo.head, 'update', fail)
    
    with pytest.raises(OSError):
        repo.commit('first')
    
    # Object written, HEAD untouched, index left stale
    assert repo.head.resolve() is None
    assert len(repo.staged()) == 1
    assert len(list(repo.store)) == 2


def test_log_max_count_stops_before_broken_parent(repo_with_commits):
    repo_with_commits.store.object_path(repo_with_commits.first_hash).unlink()
    
    blocks = list(repo_with_commits.log(max_count=1))
    
    assert len(blocks) == 1
    assert blocks[0].startswith(f'commit {repo_with_commits.second_hash}')
