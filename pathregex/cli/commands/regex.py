"""Regex command - show the translation of a pattern."""

import click

from pathregex.core.pattern import path_to_regex
from pathregex.cli.output import info, highlight, echo_color


@click.command('regex')
@click.argument('pattern')
@click.option('-v', '--verbose', is_flag=True, help='Show the pattern alongside the regex')
@click.pass_context
def regex_cmd(ctx, pattern, verbose):
    """
    Print the regular expression a pattern translates to.

    Examples:
        pathregex regex '*.txt'
        pathregex regex -- '/docs/'
    """
    source = path_to_regex(pattern)
    color = echo_color(ctx)

    if verbose:
        click.echo(info(f"Pattern: {pattern!r}"), color=color)
        click.echo(f"  {highlight(source)}", color=color)
    else:
        click.echo(source)
