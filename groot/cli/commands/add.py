"""Add command - stage files for commit."""

import click
from pathlib import Path
from groot.core.repository import Repository, GROOT_DIR
from groot.core.errors import GrootError
from groot.cli.output import success, error, info


def expand_path(resolved_path: Path):
    """List the files to stage for a path; directories are walked recursively."""
    if not resolved_path.is_dir():
        return [resolved_path]
    
    files = []
    for file_path in sorted(resolved_path.rglob('*')):
        if not file_path.is_file():
            continue
        # Skip hidden files/dirs, which includes .groot itself
        rel_parts = file_path.relative_to(resolved_path).parts
        if any(part.startswith('.') for part in rel_parts):
            continue
        files.append(file_path)
    return files


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.
    
    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Adding a file twice stages it twice.
    Directories are added file by file, skipping hidden entries.
    
    Examples:
        groot add file.txt
        groot add notes.txt todo.txt
        groot add src
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    added_files = []
    failed_files = []
    
    for path_pattern in paths:
        path = Path(path_pattern)
        resolved_path = path if path.is_absolute() else Path.cwd() / path
        
        if not resolved_path.exists():
            failed_files.append((path_pattern, "File not found"))
            continue
        
        if resolved_path.is_dir() and resolved_path.name == GROOT_DIR:
            failed_files.append((path_pattern, "Cannot add repository metadata"))
            continue
        
        for file_path in expand_path(resolved_path):
            try:
                entry = repo.add(str(file_path))
                added_files.append(entry)
            except (GrootError, OSError) as e:
                failed_files.append((str(file_path), str(e)))
    
    if added_files:
        click.echo(success(f"Added {len(added_files)} file(s) to staging area"))
        for entry in added_files:
            click.echo(info(f"  {entry.path} ({entry.hash[:7]})"))
    
    if failed_files:
        click.echo()
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for file, reason in failed_files:
            click.echo(error(f"  {file}: {reason}"))
        raise click.Abort()
    
    if not added_files:
        click.echo(error("No files matched"))
        raise click.Abort()
