"""Commit command - create a commit from staged changes."""

import click
from groot.core.repository import Repository
from groot.core.errors import GrootError
from groot.cli.output import success, error, info, warning


@click.command('commit')
@click.option('-m', '--message', required=True, help='Commit message')
def commit_cmd(message):
    """
    Record changes to the repository.
    
    Creates a commit from the staged changes in the index, points HEAD
    at it and empties the index.
    
    Empty commits are refused unless core.allowemptycommits is set.
    
    Examples:
        groot commit -m "Initial commit"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    try:
        staged = repo.staged()
        parent = repo.head.resolve()
        commit_hash = repo.commit(message)
    except (GrootError, OSError, ValueError) as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()
    
    if commit_hash is None:
        click.echo(warning("Nothing to commit (staging area is empty)"))
        click.echo(info("Use 'groot add <file>' to stage changes"))
        return
    
    click.echo(success(f"Created commit {commit_hash[:7]}"))
    click.echo(info(f"Message: {message}"))
    
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
    
    click.echo(info(f"Files: {len(staged)}"))
