"""String case conversion, substring replacement and splitting utilities.

Case handling in this module is ASCII-only and locale-independent: letters
outside A-Z and a-z are never altered, so results do not depend on the
platform or on Unicode case rules.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'to_lower',
    'to_upper',
    'capitalize',
    'equals_ignore_case',
    'replace_substring',
    'split_values',
    'split_string'
]

from typing import Callable, List, Optional, TypeVar
from helperkit.patterns import UPPER_TO_LOWER, LOWER_TO_UPPER
from helperkit.settings import Settings, get_settings

T = TypeVar('T')

def to_lower(text: str) -> str:
    """
    Convert every ASCII letter in a string to lowercase.

    Example:
        >>> to_lower('Dover-Foxcroft 2')
        'dover-foxcroft 2'
    """
    return text.translate(UPPER_TO_LOWER)

def to_upper(text: str) -> str:
    """
    Convert every ASCII letter in a string to uppercase.

    Example:
        >>> to_upper('Dover-Foxcroft 2')
        'DOVER-FOXCROFT 2'
    """
    return text.translate(LOWER_TO_UPPER)

def capitalize(text: str) -> str:
    """
    Uppercase the first character of a string and lowercase the rest.

    Example:
        >>> capitalize('pORTLAND')
        'Portland'
    """
    return to_upper(text[:1]) + to_lower(text[1:])

def equals_ignore_case(first: str, second: str) -> bool:
    return to_lower(first) == to_lower(second)

def replace_substring(text: str, old: str, new: str, ignore_case: bool = False) -> str:
    """
    Replace every occurrence of a substring.

    The string is scanned left to right. After a replacement, scanning resumes
    at the end of the match in the original string, so text introduced by
    `new` is never matched again.

    Args:
        text: String to search
        old: Substring being removed. An empty substring matches nothing.
        new: Substring put in its place
        ignore_case: If True, ASCII case differences are ignored when looking for `old`

    Returns:
        Input string with all matches replaced

    Example:
        >>> replace_substring('aaa', 'a', 'aa')
        'aaaaaa'
        >>> replace_substring('Town of TOWN', 'town', 'City', ignore_case=True)
        'City of City'
    """
    if not old:
        return text

    haystack = to_lower(text) if ignore_case else text
    needle = to_lower(old) if ignore_case else old

    pieces = []
    position = 0
    match = haystack.find(needle)
    while match != -1:
        pieces.append(text[position:match])
        pieces.append(new)
        position = match + len(old)
        match = haystack.find(needle, position)
    pieces.append(text[position:])
    return ''.join(pieces)

def split_values(text: str, value_type: Callable[[str], T] = str) -> List[T]:
    """
    Split a string on runs of whitespace and convert each token.

    Tokens that `value_type` cannot convert are skipped rather than stored
    as a default value. Whatever `value_type` accepts is kept, so with `int`
    the tokens '1_000' and '\u0664\u0662' (Arabic-Indic digits) become 1000 and 42,
    although `helperkit.numeric.is_int` rejects both.

    Args:
        text: String of whitespace-delimited tokens
        value_type: Type or callable used to convert each token

    Returns:
        Converted tokens, in order

    Example:
        >>> split_values('1 2.5  x 4', float)
        [1.0, 2.5, 4.0]
        >>> split_values('')
        []
    """
    values = []
    for token in text.split():
        try:
            values.append(value_type(token))
        except (ValueError, TypeError, ArithmeticError):
            continue
    return values

def split_string(
    text: str,
    divider: str,
    include_blanks: Optional[bool] = None,
    settings: Optional[Settings] = None
) -> List[str]:
    """
    Split a string on a literal, case-sensitive divider.

    Two adjacent dividers, or a divider at either end of the string, produce
    an empty segment. An empty divider never matches, so the whole string is
    returned as a single segment.

    Args:
        text: String to split
        divider: Literal substring separating segments
        include_blanks: If True, empty segments are kept in position. If False,
            they are dropped. Defaults to `Settings.include_blanks`.
        settings: Settings supplying the default. Defaults to `get_settings()`.

    Returns:
        Segments of the string, or an empty list for an empty string

    Example:
        >>> split_string('a,,b', ',')
        ['a', '', 'b']
        >>> split_string('a,,b', ',', include_blanks=False)
        ['a', 'b']
    """
    if include_blanks is None:
        include_blanks = (settings or get_settings()).include_blanks

    if not text:
        return []

    segments = text.split(divider) if divider else [text]

    if include_blanks:
        return segments
    else:
        return list(filter(None, segments))
