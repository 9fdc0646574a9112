"""CLI commands for pathregex."""

from pathregex.cli.commands.regex import regex_cmd
from pathregex.cli.commands.check import check_cmd

__all__ = ['regex_cmd', 'check_cmd']
