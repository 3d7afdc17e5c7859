"""Show command - display commit details with diff."""

import click
from groot.core.repository import Repository
from groot.core.errors import GrootError
from groot.operations.diff import SegmentKind
from groot.cli.output import error, info, colored
from colorama import Fore

SEGMENT_STYLE = {
    SegmentKind.ADDED: ('+', Fore.GREEN),
    SegmentKind.REMOVED: ('-', Fore.RED),
    SegmentKind.EQUAL: (' ', None),
}


def format_file_diff(file_diff, color=True):
    """Render one file's segments, one prefixed line per source line."""
    output = [colored(f"diff --groot a/{file_diff.path} b/{file_diff.path}", Fore.CYAN, color)]
    
    if file_diff.is_new:
        notice = f"new file: {file_diff.path} (introduced in this commit)"
        output.append(colored(notice, Fore.GREEN, color))
        return '\n'.join(output)
    
    if file_diff.is_unchanged:
        output.append("(unchanged)")
        return '\n'.join(output)
    
    for segment in file_diff.segments:
        prefix, fore = SEGMENT_STYLE[segment.kind]
        for line in segment.lines:
            text = prefix + line.rstrip('\r\n')
            output.append(colored(text, fore, color) if fore else text)
    
    return '\n'.join(output)


@click.command('show')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.option('--stat', is_flag=True, help='Show diffstat (summary of changes)')
@click.argument('commit', required=False, default='HEAD')
def show_cmd(no_color, stat, commit):
    """
    Show commit details with diff.
    
    Displays the commit's timestamp and message followed by a line diff
    of every file it records against the same path in its parent.
    Files the parent does not have are reported as new. The first
    commit has no prior version to compare.
    
    Examples:
        groot show                # Show HEAD commit with diff
        groot show 3f2a9c1        # Show a commit by abbreviated hash
        groot show --stat         # Show with change summary
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    use_color = not no_color
    
    try:
        result = repo.show(commit)
    except (GrootError, OSError) as e:
        click.echo(error(f"Show failed: {e}"))
        raise click.Abort()
    
    click.echo(colored(f"commit {result.commit_hash}", Fore.YELLOW, use_color))
    if result.commit.parent:
        click.echo(f"Parent: {result.commit.parent[:7]}")
    click.echo(f"Date:   {result.commit.timestamp}")
    click.echo()
    for line in result.commit.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()
    
    if not result.has_parent:
        click.echo(info("No prior version to compare"))
        return
    
    if not result.diffs:
        click.echo(info("(no files in this commit)"))
        return
    
    if stat:
        total_additions = 0
        total_deletions = 0
        
        click.echo("Files changed:")
        for diff in result.diffs:
            total_additions += diff.additions
            total_deletions += diff.deletions
            status = "new" if diff.is_new else "modified"
            
            if use_color:
                changes = f"{Fore.GREEN}+{diff.additions}{Fore.RESET} {Fore.RED}-{diff.deletions}{Fore.RESET}"
            else:
                changes = f"+{diff.additions} -{diff.deletions}"
            
            click.echo(f"  {diff.path:<40} {status:<10} {changes}")
        
        click.echo()
        click.echo(f"{len(result.diffs)} file(s) changed, "
                   f"{total_additions} insertions(+), {total_deletions} deletions(-)")
        return
    
    for diff in result.diffs:
        click.echo(format_file_diff(diff, color=use_color))
