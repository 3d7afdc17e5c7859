"""Config command - manage repository configuration."""

import click
from groot.core.repository import Repository
from groot.core.config import split_key
from groot.cli.output import success, error, info


def _require_repo():
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    return repo


@click.group('config')
def config_cmd():
    """Get and set repository options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
def config_set(key, value):
    """
    Set a config value.
    
    Examples:
        groot config set core.allowemptycommits true
    """
    repo = _require_repo()
    section, option = split_key(key)
    repo.config.set(section, option, value)
    click.echo(success(f"Set repository config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value.
    
    Examples:
        groot config get core.allowemptycommits
    """
    repo = _require_repo()
    section, option = split_key(key)
    value = repo.config.get(section, option)
    
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
def config_unset(key):
    """
    Remove a config value.
    
    Examples:
        groot config unset core.allowemptycommits
    """
    repo = _require_repo()
    section, option = split_key(key)
    
    if not repo.config.unset(section, option):
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    
    click.echo(success(f"Removed {key}"))


@config_cmd.command('list')
def config_list():
    """
    List all config values.
    
    Examples:
        groot config list
    """
    repo = _require_repo()
    values = repo.config.list_all()
    
    if not values:
        click.echo(info("No configuration set"))
        return
    
    for section, options in values.items():
        for key, value in options.items():
            click.echo(f"{section}.{key}={value}")
