"""Case converter for string naming conventions."""

import re
from typing import List

import inflection

# Anything that is not a unicode letter or digit separates words
_SEPARATOR_RE = re.compile(r"[\W_]+")


def _split_chunk(chunk: str) -> List[str]:
    words = []
    start = 0
    for i in range(1, len(chunk)):
        prev, cur = chunk[i - 1], chunk[i]
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""

        if cur.isupper() and (prev.islower() or prev.isdigit()):
            words.append(chunk[start:i])
            start = i
        elif cur.isupper() and prev.isupper() and nxt.islower():
            words.append(chunk[start:i])
            start = i

    words.append(chunk[start:])
    return words


def split_words(content: str) -> List[str]:
    """Split a string into words.

    Args:
        content: Arbitrary input string.

    Returns:
        The words found, with their original casing.

    Examples:
        >>> split_words("@foo BAR")
        ['foo', 'BAR']
        >>> split_words("XMLHttpRequest_v2")
        ['XML', 'Http', 'Request', 'v2']
    """
    words = []
    for chunk in _SEPARATOR_RE.split(content):
        if chunk:
            words.extend(_split_chunk(chunk))
    return words


def _lower_words(content: str) -> List[str]:
    return [word.lower() for word in split_words(content)]


def _capital_words(content: str) -> List[str]:
    return [word.capitalize() for word in split_words(content)]


def no_case(content: str) -> str:
    return " ".join(_lower_words(content))


def snake_case(content: str) -> str:
    return "_".join(_lower_words(content))


def constant_case(content: str) -> str:
    return snake_case(content).upper()


def kebab_case(content: str) -> str:
    return inflection.dasherize(snake_case(content))


def dot_case(content: str) -> str:
    return ".".join(_lower_words(content))


def path_case(content: str) -> str:
    return "/".join(_lower_words(content))


def _camelize_words(words: List[str], uppercase_first_letter: bool = True) -> str:
    # a word starting with a digit keeps a `_` in front so `version 1` and `version1` differ
    parts = []
    for i, word in enumerate(words):
        part = inflection.camelize(word) if i > 0 or uppercase_first_letter else word
        if i > 0 and word[0].isdigit():
            part = "_" + part
        parts.append(part)
    return "".join(parts)


def camel_case(content: str) -> str:
    """Convert a string to camelCase.

    Examples:
        >>> camel_case("test string")
        'testString'
        >>> camel_case("version 1")
        'version_1'
    """
    return _camelize_words(_lower_words(content), uppercase_first_letter=False)


def pascal_case(content: str) -> str:
    return _camelize_words(_lower_words(content))


def pascal_snake_case(content: str) -> str:
    return "_".join(_capital_words(content))


def capital_case(content: str) -> str:
    return " ".join(_capital_words(content))


def train_case(content: str) -> str:
    return "-".join(_capital_words(content))


def sentence_case(content: str) -> str:
    words = _lower_words(content)
    if words:
        words[0] = words[0].capitalize()
    return " ".join(words)
