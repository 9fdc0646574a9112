"""Core pattern translation and configuration."""

from pathregex.core.pattern import (
    IgnorePattern,
    PatternTranslationError,
    compile_pattern,
    path_to_regex,
)
from pathregex.core.config import Config

__all__ = [
    'IgnorePattern', 'PatternTranslationError', 'compile_pattern',
    'path_to_regex', 'Config',
]
