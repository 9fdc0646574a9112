"""pathregex - translate gitignore-style patterns into regular expressions."""

__version__ = '0.1.0'

from pathregex.core.pattern import (
    IgnorePattern,
    PatternTranslationError,
    compile_pattern,
    path_to_regex,
)

__all__ = [
    'IgnorePattern',
    'PatternTranslationError',
    'compile_pattern',
    'path_to_regex',
]
