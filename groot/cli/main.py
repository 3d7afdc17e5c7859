"""Main CLI entry point for Groot."""

import click
from colorama import init

from groot import __version__
from groot.cli.output import BANNER
from groot.cli.commands import (init_cmd, add_cmd, commit_cmd, status_cmd, log_cmd,
                                show_cmd, config_cmd, cat_file_cmd, count_objects_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class GrootGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GrootGroup)
@click.version_option(version=__version__)
def cli():
    pass


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(status_cmd)
cli.add_command(log_cmd)
cli.add_command(show_cmd)
cli.add_command(config_cmd)
cli.add_command(cat_file_cmd)
cli.add_command(count_objects_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
