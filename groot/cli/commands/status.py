"""Status command - show what is staged for the next commit."""

import click
from groot.core.repository import Repository
from groot.core.errors import GrootError
from groot.cli.output import error, info
from colorama import Fore


@click.command('status')
def status_cmd():
    """
    Show the staging area.
    
    Lists the entries that the next commit will record, in the order
    they were added, along with the commit HEAD points to.
    
    Examples:
        groot status
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    try:
        head = repo.head.resolve()
        staged = repo.staged()
    except (GrootError, OSError) as e:
        click.echo(error(f"Status failed: {e}"))
        raise click.Abort()
    
    if head:
        click.echo(f"HEAD at {head[:7]}")
    else:
        click.echo("No commits yet")
    click.echo()
    
    if not staged:
        click.echo(info("Nothing staged"))
        return
    
    click.echo("Changes to be committed:")
    for entry in staged:
        click.echo(f"  {Fore.GREEN}{entry.path}{Fore.RESET} ({entry.hash[:7]})")
