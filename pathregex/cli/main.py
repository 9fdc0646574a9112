"""Main CLI entry point for pathregex."""

import logging

import click
from colorama import init

from pathregex import __version__
from pathregex.core.config import Config
from pathregex.cli.output import BANNER
from pathregex.cli.commands import regex_cmd, check_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class PathregexGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=PathregexGroup)
@click.version_option(version=__version__)
@click.option('--debug', is_flag=True, help='Log translation details to stderr')
@click.pass_context
def cli(ctx, debug):
    if debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    config = Config()
    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['color'] = config.get_bool('color', 'ui', fallback=True)


cli.add_command(regex_cmd)
cli.add_command(check_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
