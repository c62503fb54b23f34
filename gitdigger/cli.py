#!/usr/bin/env python3

import sys

import click
from pathlib import Path

from gitdigger import __version__
from gitdigger.config import load_config, merge_configs, configure_logging
from gitdigger.cli_utils import add_common_options
from gitdigger.exit_codes import (
    SUCCESS, USAGE_ERROR, INTERRUPTED,
    ParseFailure, FilesystemPreparationError,
)
from gitdigger.format_utils import format_output
from gitdigger.render import render_sync_table
from gitdigger.resolver import IdentityResolver
from gitdigger.services.mirror_service import MirrorService


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(version=__version__, prog_name="gitdigger")
@click.argument("repository_url")
@click.argument("root_folder", type=click.Path(file_okay=False, path_type=Path))
@click.option("--clone-only", is_flag=True, help="Only clone missing mirrors, never pull existing ones")
@click.option("--depth", type=click.IntRange(min=1), default=None, help="Create a shallow clone with this many commits")
@click.option("--no-check", is_flag=True, help="Skip the reachability check before cloning or pulling")
@click.option("--table", is_flag=True, help="Display the result as a formatted table")
@add_common_options('format', 'verbose', 'quiet')
@click.pass_context
def cli(ctx, repository_url, root_folder, clone_only, depth, no_check, table,
        output_format, verbose, quiet):
    """gitdigger - Clone or update a local mirror of a git repository.

    REPOSITORY_URL may point anywhere inside a repository on GitHub,
    GitLab or a known GitLab instance; the mirror is kept in
    ROOT_FOLDER/HOST/OWNER/REPO.

    \b
    Examples:
        gitdigger https://github.com/szabgab/rust-digger ~/mirrors
        gitdigger https://gitlab.com/user/repo/-/tree/main ~/mirrors --clone-only
    """
    config = load_config()
    configure_logging(config, verbose=verbose, quiet=quiet)
    if no_check:
        config = merge_configs(config, {'network': {'check_reachability': False}})

    try:
        identity = IdentityResolver.from_config(config).resolve(repository_url)
    except ParseFailure as e:
        click.echo(f"Error creating repository from URL: {e}", err=True)
        ctx.exit(e.exit_code)

    try:
        result = MirrorService(config=config).synchronize(
            identity, root_folder, clone_only=clone_only, depth=depth
        )
    except FilesystemPreparationError as e:
        click.echo(f"Error updating repository: {e}", err=True)
        ctx.exit(e.exit_code)

    if quiet:
        return SUCCESS

    if output_format:
        for line in format_output([result.to_dict()], output_format):
            click.echo(line)
    elif table:
        render_sync_table(result)
    else:
        click.echo(f"Repository updated successfully in {result.path}")

    return SUCCESS


def main(argv=None):
    """Run the CLI and return its exit code."""
    try:
        return cli.main(args=argv, prog_name="gitdigger", standalone_mode=False) or SUCCESS
    except click.UsageError as e:
        e.show()
        return USAGE_ERROR
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Interrupted by user", err=True)
        return INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
