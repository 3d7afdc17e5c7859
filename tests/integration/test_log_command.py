"""Integration tests for log command."""

import pytest
from click.testing import CliRunner
from groot.cli.main import cli


@pytest.fixture
def cli_repo(repo_with_commits, monkeypatch):
    monkeypatch.chdir(repo_with_commits.work_tree)
    return repo_with_commits


def test_log_empty_repository(in_repo):
    result = CliRunner().invoke(cli, ['log'])
    assert result.exit_code == 0
    assert 'No commits yet' in result.output


def test_log_lists_commits_newest_first(cli_repo):
    result = CliRunner().invoke(cli, ['log', '--no-color'])
    
    assert result.exit_code == 0
    second = result.output.index(f'commit {cli_repo.second_hash}')
    first = result.output.index(f'commit {cli_repo.first_hash}')
    assert second < first
    assert '    second' in result.output
    assert 'Date:' in result.output


def test_log_oneline(cli_repo):
    result = CliRunner().invoke(cli, ['log', '--oneline', '--no-color'])
    
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        f'{cli_repo.second_hash[:7]} second',
        f'{cli_repo.first_hash[:7]} first',
    ]


def test_log_max_count(cli_repo):
    result = CliRunner().invoke(cli, ['log', '-n', '1', '--oneline', '--no-color'])
    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 1


def test_log_corrupt_history_prints_partial_then_fails(cli_repo):
    cli_repo.store.object_path(cli_repo.first_hash).unlink()
    
    result = CliRunner().invoke(cli, ['log', '--no-color'])
    
    assert result.exit_code != 0
    assert f'commit {cli_repo.second_hash}' in result.output
    assert 'History is broken' in result.output


def test_log_max_count_with_broken_older_history(cli_repo):
    cli_repo.store.object_path(cli_repo.first_hash).unlink()
    
    result = CliRunner().invoke(cli, ['log', '-n', '1', '--oneline', '--no-color'])
    
    assert result.exit_code == 0
    assert result.output.splitlines() == [f'{cli_repo.second_hash[:7]} second']


def test_log_rejects_negative_max_count(cli_repo):
    result = CliRunner().invoke(cli, ['log', '-n', '-1'])
    assert result.exit_code == 2
