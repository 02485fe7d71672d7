"""Regex patterns and character tables used for string and numeric parsing.
"""

__docformat__ = 'google'

import re
from string import ascii_lowercase, ascii_uppercase
from typing import Dict

## Case mapping
UPPER_TO_LOWER: Dict[int, str] = str.maketrans(ascii_uppercase, ascii_lowercase)
"""Translation table mapping ASCII uppercase letters to lowercase.

Characters outside A-Z are left alone, so the mapping is locale-independent.

Used in `helperkit.strings.to_lower`."""

LOWER_TO_UPPER: Dict[int, str] = str.maketrans(ascii_lowercase, ascii_uppercase)
"""Translation table mapping ASCII lowercase letters to uppercase.

Used in `helperkit.strings.to_upper`."""

## Numerals
# Building blocks
SIGN: str = "[+-]?"
"""@private"""

DIGITS: str = "[0-9]+"
"""@private"""

FRACTION: str = "(?:[0-9]+\\.[0-9]*|\\.[0-9]+)"
""" Uncompiled regex building block representing digits with exactly one decimal point.

At least one digit must appear on one side of the point ('4.', '.5', '4.2')."""

EXPONENT: str = "(?:[eE][+-]?[0-9]+)"
""" Uncompiled regex building block representing a scientific notation exponent."""

LEADING_SPACE: str = "[ \\t\\n\\v\\f\\r]*"
"""Whitespace skipped before a numeral, matching stream extraction."""

# Patterns
INT_PATTERN: re.Pattern = re.compile(f"{SIGN}{DIGITS}")
"""Compiled regex matching a complete integer string.

Used with `fullmatch` in `helperkit.numeric.is_int`."""

DECIMAL_PATTERN: re.Pattern = re.compile(f"{SIGN}{FRACTION}")
"""Compiled regex matching a complete decimal string with exactly one point.

Used with `fullmatch` in `helperkit.numeric.is_decimal`."""

FLOAT_PATTERN: re.Pattern = re.compile(f"{SIGN}(?:{FRACTION}|{DIGITS}){EXPONENT}?")
"""Compiled regex matching a complete floating point string, exponent allowed.

Used for strict conversion in `helperkit.numeric.convert_string`."""

LEADING_INT_PATTERN: re.Pattern = re.compile(f"{LEADING_SPACE}({SIGN}{DIGITS})")
"""Compiled regex matching the leading integer portion of a string.

Used for lenient conversion in `helperkit.numeric.convert_string`."""

LEADING_FLOAT_PATTERN: re.Pattern = re.compile(
    f"{LEADING_SPACE}({SIGN}(?:{FRACTION}|{DIGITS}){EXPONENT}?)"
    )
"""Compiled regex matching the leading floating point portion of a string.

Used for lenient conversion in `helperkit.numeric.convert_string`."""
