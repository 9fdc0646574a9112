"""Translation of gitignore-style patterns into regular expressions."""

import logging
import re2

logger = logging.getLogger(__name__)

# A lone backslash names a file or directory called "\"
BACKSLASH_REGEX = r'\\(?:\z|/)'

# Never matches anything
EMPTY_REGEX = r'[^\x00-\x{10FFFF}]'


class PatternTranslationError(RuntimeError):
    """Raised when a translated pattern is not a valid regular expression.

    This always indicates a bug in the translator, never a bad pattern.
    """


def path_to_regex(pattern: str) -> str:
    """
    Translate a single gitignore-style pattern into RE2 regex source.

    The result is meant to be searched (not fully matched) against a
    '/'-separated path; all anchoring is part of the expression.

    Args:
        pattern: One ignore rule, without negation or comments

    Returns:
        Regular expression source string
    """
    if pattern == '\\':
        return BACKSLASH_REGEX
    if not pattern:
        return EMPTY_REGEX

    regex_parts = []

    # A slash anywhere except the last position anchors to the root
    first_slash = pattern.find('/')
    anchored = first_slash != -1 and first_slash != len(pattern) - 1
    regex_parts.append(r'\A' if anchored else r'(?:\A|/)')

    directory_only = pattern.endswith('/')
    if directory_only:
        pattern = pattern.rstrip('/')

    # "dir/*" only matches direct children of dir
    shallow = len(pattern) > 1 and pattern.endswith('/*')

    i = 0
    if anchored and pattern.startswith('/'):
        # The root slash is optional in the candidate path
        regex_parts.append('/?')
        i = 1

    while i < len(pattern):
        c = pattern[i]

        if c == '*':
            if i + 1 < len(pattern) and pattern[i + 1] == '*':
                starts_segment = i == 0 or pattern[i - 1] == '/'
                ends_segment = i + 2 == len(pattern) or pattern[i + 2] == '/'
                if starts_segment and ends_segment:
                    regex_parts.append('.*')
                    i += 2
                    continue
            regex_parts.append('[^/]*')
        elif c == '?':
            regex_parts.append('[^/]')
        else:
            regex_parts.append(re2.escape(c))
        i += 1

    if directory_only:
        regex_parts.append('/')
    elif shallow:
        regex_parts.append(r'\z')
    else:
        regex_parts.append(r'(?:\z|/)')

    return ''.join(regex_parts)


class IgnorePattern:
    """A compiled ignore pattern that can be tested against paths."""

    def __init__(self, pattern: str):
        """
        Compile an ignore pattern.

        Args:
            pattern: The gitignore-style pattern to compile
        """
        self._pattern = pattern
        self._regex = _compile_regex(pattern, path_to_regex(pattern))

    @property
    def pattern(self) -> str:
        """The pattern this matcher was compiled from."""
        return self._pattern

    @property
    def regex(self):
        """The compiled RE2 expression."""
        return self._regex

    def matches(self, path: str) -> bool:
        """
        Check if a path matches this pattern.

        Args:
            path: '/'-separated path, already normalized by the caller

        Returns:
            True if the path matches this pattern
        """
        return self._regex.search(path) is not None

    def __repr__(self) -> str:
        return f"IgnorePattern({self._pattern!r})"


def _compile_regex(pattern: str, source: str):
    try:
        compiled = re2.compile(source)
    except re2.error as exc:
        logger.critical("Translated %r into invalid regex %r: %s", pattern, source, exc)
        raise PatternTranslationError(
            f"Internal error translating {pattern!r}: {source!r} is not a valid regex"
        ) from exc
    logger.debug("Compiled %r as %r", pattern, source)
    return compiled


def compile_pattern(pattern: str) -> IgnorePattern:
    """
    Compile one gitignore-style pattern into a matcher.

    Args:
        pattern: One ignore rule

    Returns:
        An immutable IgnorePattern
    """
    return IgnorePattern(pattern)
