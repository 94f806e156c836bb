"""
Tokenizing of free-text address fields
"""
import re
from typing import List, Optional

# Everything except ASCII letters, digits and spaces is dropped
_STRIP_PATTERN = re.compile(r'[^a-zA-Z0-9 ]+')

# Building number with a letter suffix: "47a" -> "47", "a"
_NUMBER_SUFFIX_PATTERN = re.compile(r'^([0-9]+)([a-z]+)$')


def tokenize(text: Optional[str]) -> List[str]:
    """
    Splits a field into sorted canonical tokens

    Args:
        text: Free text, e.g. "Flat 47a, Rose Tower"

    Returns:
        Lowercase alphanumeric tokens sorted lexicographically, duplicates
        kept: ['47', 'a', 'flat', 'rose', 'tower']
    """
    if not text:
        return []

    cleaned = _STRIP_PATTERN.sub('', text).lower()

    tokens = []
    for word in cleaned.split(' '):
        if not word:
            continue

        match = _NUMBER_SUFFIX_PATTERN.match(word)
        if match:
            tokens.extend(match.groups())
        else:
            tokens.append(word)

    tokens.sort()
    return tokens
