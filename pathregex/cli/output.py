"""CLI output utilities and formatting."""

from typing import Optional

from colorama import Fore, Style

BANNER = f"{Fore.CYAN}{Style.BRIGHT}pathregex{Style.RESET_ALL} - gitignore patterns as regular expressions\n"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def highlight(text: str) -> str:
    """Format a pattern or regex in bright green."""
    return f"{Fore.GREEN}{Style.BRIGHT}{text}{Style.RESET_ALL}"


def echo_color(ctx) -> Optional[bool]:
    """Color argument for click.echo: None lets click decide, False strips."""
    return None if ctx.obj.get('color', True) else False
