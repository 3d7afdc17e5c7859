"""Low-level commands for inspecting the object store."""

import click
from groot.core.repository import Repository
from groot.core.errors import GrootError
from groot.core.objects import Commit
from groot.cli.output import error, info


def is_commit(data: bytes) -> bool:
    """Check whether stored bytes decode as a commit record."""
    try:
        Commit.from_bytes(data)
    except ValueError:
        return False
    return True


@click.command('cat-file')
@click.argument('object_hash')
@click.option('-s', 'show_size', is_flag=True, help='Show object size')
@click.option('-t', 'show_type', is_flag=True, help='Show object type')
def cat_file_cmd(object_hash, show_size, show_type):
    """
    Print the content of a stored object.
    
    Accepts a full hash or a unique prefix of at least four characters.
    
    Examples:
        groot cat-file 3b18e512       # Print content
        groot cat-file -s 3b18e512    # Print size in bytes
        groot cat-file -t 3b18e512    # Print 'blob' or 'commit'
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    try:
        full_hash = repo.store.resolve_prefix(object_hash)
        data = repo.store.get(full_hash)
    except (GrootError, OSError) as e:
        click.echo(error(f"cat-file failed: {e}"))
        raise click.Abort()
    
    if show_size:
        click.echo(len(data))
        return
    
    if show_type:
        click.echo('commit' if is_commit(data) else 'blob')
        return
    
    try:
        click.echo(data.decode('utf-8'), nl=False)
    except UnicodeDecodeError:
        click.echo(f"<binary data: {len(data)} bytes>")


@click.command('count-objects')
@click.option('-v', '--verbose', is_flag=True, help='Show detailed information')
def count_objects_cmd(verbose):
    """
    Count objects in the repository.
    
    Examples:
        groot count-objects          # Show object count and size
        groot count-objects -v       # Also split counts by type
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    total_objects = 0
    total_size = 0
    type_counts = {'commit': 0, 'blob': 0}
    
    for object_id in repo.store:
        data = repo.store.get(object_id)
        total_objects += 1
        total_size += len(data)
        
        if verbose:
            type_counts['commit' if is_commit(data) else 'blob'] += 1
    
    click.echo(f"{total_objects} objects, {total_size} bytes")
    
    if verbose:
        click.echo(info(f"  commits: {type_counts['commit']}"))
        click.echo(info(f"  blobs:   {type_counts['blob']}"))
