"""Check command - test paths against a single pattern."""

import click

from pathregex.core.pattern import compile_pattern
from pathregex.cli.output import warning, highlight, echo_color


def _read_paths(stream):
    for line in stream:
        line = line.rstrip('\r\n')
        if line:
            yield line


@click.command('check')
@click.argument('pattern')
@click.argument('paths', nargs=-1)
@click.option('--stdin', 'from_stdin', is_flag=True, help='Read paths from standard input, one per line')
@click.option('-v', '--verbose', is_flag=True, help='Show the pattern next to each matching path')
@click.option('-n', '--non-matching', is_flag=True, help='Also show paths that do not match (implies -v)')
@click.pass_context
def check_cmd(ctx, pattern, paths, from_stdin, verbose, non_matching):
    """
    Print the paths matched by PATTERN.

    Exits with status 0 if at least one path matched and 1 otherwise.
    In verbose mode each line is "PATTERN<TAB>PATH"; non-matching paths
    have an empty pattern column.

    Examples:
        pathregex check '*.log' app.log src/main.py
        find . -type f | pathregex check --stdin 'build/'
    """
    if not paths and not from_stdin:
        raise click.UsageError("No paths given (use --stdin to read them from standard input)")

    config = ctx.obj['config']
    verbose = verbose or non_matching or config.get_bool('core', 'verbose')
    color = echo_color(ctx)

    candidates = list(paths)
    if from_stdin:
        with click.open_file('-') as stream:
            candidates.extend(_read_paths(stream))
        if not candidates:
            click.echo(warning("No paths read from standard input"), err=True, color=color)
            ctx.exit(1)

    matcher = compile_pattern(pattern)
    matched = 0

    for path in candidates:
        if matcher.matches(path):
            matched += 1
            if verbose:
                click.echo(f"{highlight(pattern)}\t{path}", color=color)
            else:
                click.echo(path)
        elif non_matching:
            click.echo(f"\t{path}")

    ctx.exit(0 if matched else 1)
