"""Description pattern matching.

Patterns are regular expressions searched anywhere in a transaction
description. A category matches when any one of its patterns does.
"""

import re
from typing import Iterable, Sequence

from ledgerit.domain.errors import ValidationError, invalid_pattern


def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a single raw pattern.

    Raises:
        ValidationError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValidationError(invalid_pattern(pattern, e)) from e


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern]:
    """Compile raw patterns in order."""
    return [compile_pattern(pattern) for pattern in patterns]


def matches(patterns: Sequence[re.Pattern], description: str) -> bool:
    """Return True if any compiled pattern is found in the description."""
    return any(pattern.search(description) for pattern in patterns)
