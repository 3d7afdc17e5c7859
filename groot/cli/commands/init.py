"""Initialize a new Groot repository."""

import click
from pathlib import Path
from groot.core.repository import Repository
from groot.core.errors import AlreadyInitializedError
from groot.cli.output import success, error, info, warning


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Groot repository.
    
    Creates a .groot directory with the object store, HEAD, index and
    config. Running init on an existing repository is harmless: missing
    pieces are recreated and nothing is overwritten.
    
    Examples:
        groot init                    # Initialize in current directory
        groot init my-project         # Initialize in my-project directory
    """
    try:
        repo_path = Path(path).resolve()
        
        # Create directory if it doesn't exist
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))
        
        repo = Repository(str(repo_path))
        
        try:
            repo.init()
        except AlreadyInitializedError as e:
            click.echo(warning(str(e)))
            return
        
        click.echo()
        click.echo(success(f"Initialized empty Groot repository in {repo.groot_dir}"))
        click.echo()
        click.echo(info("Repository structure created:"))
        click.echo(info("  .groot/objects/   - Object database"))
        click.echo(info("  .groot/HEAD       - Latest commit pointer"))
        click.echo(info("  .groot/index      - Staging area"))
        click.echo(info("  .groot/config     - Repository configuration"))
        click.echo()
        click.echo(info("You can now start tracking files with:"))
        click.echo(info("  groot add <file>"))
        click.echo(info("  groot commit -m 'message'"))
        
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except OSError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()
