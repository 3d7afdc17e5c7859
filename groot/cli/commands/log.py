"""Log command - show commit history."""

import click
from groot.core.repository import Repository, format_commit
from groot.core.errors import GrootError
from groot.cli.output import error, info, colored
from colorama import Fore


@click.command('log')
@click.option('-n', '--max-count', type=click.IntRange(min=0), help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show each commit on a single line')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def log_cmd(max_count, oneline, no_color):
    """
    Show commit history.
    
    Walks back from HEAD through each commit's parent, most recent
    first, printing the hash, timestamp and message of every commit.
    
    Examples:
        groot log                  # Full history
        groot log -n 5             # Last 5 commits
        groot log --oneline        # Compact view
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    use_color = not no_color
    shown = 0
    
    try:
        for commit_hash, commit in repo.history(max_count):
            if oneline:
                subject = commit.message.split('\n')[0]
                click.echo(f"{colored(commit_hash[:7], Fore.YELLOW, use_color)} {subject}")
            else:
                if shown:
                    click.echo()
                header, _, rest = format_commit(commit_hash, commit).partition('\n')
                click.echo(colored(header, Fore.YELLOW, use_color))
                click.echo(rest)
            shown += 1
    except GrootError as e:
        # Whatever history came before the break has already been printed
        click.echo(error(f"History is broken: {e}"))
        raise click.Abort()
    except OSError as e:
        click.echo(error(f"Log failed: {e}"))
        raise click.Abort()
    
    if shown == 0:
        click.echo(info("No commits yet"))
