"""Numeric string validation and conversion.

Conversion comes in two flavors:
    1. Lenient (the default): the leading numeral of a string is converted, and a
       string with no leading numeral silently becomes zero. Integers too large
       for the target type saturate at its limits.
    2. Strict: the whole string must be a numeral that fits the target type,
       otherwise `helperkit.exceptions.ConversionError` is raised.

The lenient path is the behavior most callers of `string_to_int` and friends
rely on. A zero return cannot be told apart from a literal '0', so callers who
need to know should use `parse_number` instead.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'NumericType',
    # Functions
    'is_int',
    'is_decimal',
    'is_num',
    'convert_string',
    'parse_number',
    'string_to_int',
    'string_to_short',
    'string_to_long',
    'string_to_double',
    'string_to_float',
    'double_to_string',
    'float_to_string',
    'zero_fill'
]

import logging
import math
from enum import Enum
from typing import Optional, Union
import numpy as np
from helperkit.exceptions import ConversionError
from helperkit.patterns import (
    INT_PATTERN,
    DECIMAL_PATTERN,
    FLOAT_PATTERN,
    LEADING_INT_PATTERN,
    LEADING_FLOAT_PATTERN
)
from helperkit.scalars import clamp
from helperkit.settings import Settings, get_settings

logger = logging.getLogger(__name__)

Number = Union[int, float]

class NumericType(Enum):
    """
    Fixed-width numeric types a string can be converted to.

    Each member is backed by a numpy dtype that supplies its range.
    """
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(DTYPES[self])

    @property
    def is_integer(self) -> bool:
        return np.issubdtype(self.dtype, np.integer)

    @property
    def zero(self) -> Number:
        return 0 if self.is_integer else 0.0

    @property
    def bounds(self) -> tuple:
        """
        Smallest and largest value representable by the type.
        """
        info = np.iinfo(self.dtype) if self.is_integer else np.finfo(self.dtype)
        if self.is_integer:
            return int(info.min), int(info.max)
        return float(info.min), float(info.max)

DTYPES = {
    NumericType.SHORT: np.int16,
    NumericType.INT: np.int32,
    NumericType.LONG: np.int64,
    NumericType.FLOAT: np.float32,
    NumericType.DOUBLE: np.float64
}
"""@private"""

def is_int(text: str) -> bool:
    """
    Check if a string is an integer.

    Only an optional leading sign and decimal digits are allowed. Decimal
    points, exponents and whitespace make the string a non-integer.

    Example:
        >>> is_int('-7')
        True
        >>> is_int('4.2')
        False
        >>> is_int('')
        False
    """
    return INT_PATTERN.fullmatch(text) is not None

def is_decimal(text: str) -> bool:
    """
    Check if a string is a decimal number with exactly one decimal point.

    The string is validated under the assumption that it will become a double.
    Integer strings are not decimals.

    Example:
        >>> is_decimal('4.2')
        True
        >>> is_decimal('42')
        False
        >>> is_decimal('.5')
        True
    """
    return DECIMAL_PATTERN.fullmatch(text) is not None

def is_num(text: str) -> bool:
    """
    Check if a string is an integer or a decimal.

    Prefer `is_int` or `is_decimal` when the kind of number matters.
    """
    return is_int(text) or is_decimal(text)

def _to_single(value: float) -> float:
    with np.errstate(over='ignore'):
        return float(np.float32(value))

def _convert_lenient(text: str, numeric_type: NumericType) -> Number:
    pattern = LEADING_INT_PATTERN if numeric_type.is_integer else LEADING_FLOAT_PATTERN
    match = pattern.match(text)

    if match is None:
        logger.debug("No %s numeral at start of %r, using zero", numeric_type.value, text)
        return numeric_type.zero

    if numeric_type.is_integer:
        value = int(match.group(1))
        lower, upper = numeric_type.bounds
        saturated = clamp(value, lower, upper)
        if saturated != value:
            logger.debug("%r is out of range for %s, saturated to %d", text, numeric_type.value, saturated)
        return saturated

    value = float(match.group(1))
    if numeric_type is NumericType.FLOAT:
        return _to_single(value)
    return value

def _convert_strict(text: str, numeric_type: NumericType) -> Number:
    pattern = INT_PATTERN if numeric_type.is_integer else FLOAT_PATTERN

    if pattern.fullmatch(text) is None:
        raise ConversionError(
            f"{text!r} is not a valid {numeric_type.value}",
            text=text,
            numeric_type=numeric_type.value
        )

    if numeric_type.is_integer:
        value = int(text)
        lower, upper = numeric_type.bounds
        in_range = lower <= value <= upper
    else:
        value = float(text)
        if numeric_type is NumericType.FLOAT:
            value = _to_single(value)
        in_range = math.isfinite(value)

    if not in_range:
        raise ConversionError(
            f"{text!r} is out of range for {numeric_type.value}",
            text=text,
            numeric_type=numeric_type.value
        )
    return value

def convert_string(
    text: str,
    numeric_type: NumericType = NumericType.INT,
    strict: Optional[bool] = None,
    settings: Optional[Settings] = None
) -> Number:
    """
    Convert a string to the given numeric type.

    Args:
        text: String to convert
        numeric_type: Target type
        strict: If True, raise on malformed or out-of-range input. If False,
            convert the leading numeral and fall back to zero. Defaults to
            `Settings.strict_conversion`.
        settings: Settings supplying the default. Defaults to `get_settings()`.

    Returns:
        An int for integer types, a float for floating point types

    Raises:
        ConversionError: Only in strict mode

    Example:
        >>> convert_string('42 towns')
        42
        >>> convert_string('plantation')
        0
        >>> convert_string('70000', NumericType.SHORT)
        32767
        >>> convert_string(' 2.5e2x', NumericType.DOUBLE)
        250.0
    """
    if strict is None:
        strict = (settings or get_settings()).strict_conversion

    if strict:
        return _convert_strict(text, numeric_type)
    else:
        return _convert_lenient(text, numeric_type)

def parse_number(text: str, numeric_type: NumericType = NumericType.INT) -> Number:
    """
    Strictly convert a string, raising `ConversionError` on failure.
    """
    return convert_string(text, numeric_type, strict=True)

def string_to_int(text: str) -> int:
    return convert_string(text, NumericType.INT, strict=False)

def string_to_short(text: str) -> int:
    return convert_string(text, NumericType.SHORT, strict=False)

def string_to_long(text: str) -> int:
    return convert_string(text, NumericType.LONG, strict=False)

def string_to_double(text: str) -> float:
    return convert_string(text, NumericType.DOUBLE, strict=False)

def string_to_float(text: str) -> float:
    """
    Leniently convert a string to a single precision value.

    The result is a Python float holding the nearest single precision value,
    so `string_to_float('0.1') != 0.1`.
    """
    return convert_string(text, NumericType.FLOAT, strict=False)

def double_to_string(value: float) -> str:
    """
    Shortest decimal text that reads back as the same double.

    Example:
        >>> double_to_string(0.1)
        '0.1'
        >>> double_to_string(1e20)
        '1e+20'
    """
    return repr(float(value))

def float_to_string(value: float) -> str:
    """
    Shortest decimal text that reads back as the same single precision value.

    Example:
        >>> float_to_string(string_to_float('0.1'))
        '0.1'
    """
    with np.errstate(over='ignore'):
        return str(np.float32(value))

def zero_fill(
    num: int,
    length: int,
    fill_char: Optional[str] = None,
    settings: Optional[Settings] = None
) -> str:
    """
    Left-pad an integer to a fixed number of characters.

    A minus sign stays in front of the padding. When the number is already
    longer than `length`, only its first `length` characters are kept, so
    the result is always exactly `length` characters. The sign counts toward
    `length`, so a negative number cut this way can lose digits or keep none:
    `zero_fill(-12, 2)` is '-1' and `zero_fill(-7, 1)` is '-'.

    Args:
        num: Integer to render
        length: Width of the result
        fill_char: Padding character. Defaults to `Settings.fill_char`.
        settings: Settings supplying the default. Defaults to `get_settings()`.

    Example:
        >>> zero_fill(7, 3)
        '007'
        >>> zero_fill(-7, 4)
        '-007'
        >>> zero_fill(12345, 3)
        '123'
    """
    if fill_char is None:
        fill_char = (settings or get_settings()).fill_char

    if length <= 0:
        return ''

    sign = '-' if num < 0 else ''
    digits = str(abs(int(num)))
    padded = sign + digits.rjust(length - len(sign), fill_char)
    return padded[:length]
