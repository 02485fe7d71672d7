import math
import unittest
from unittest.mock import patch
import numpy as np
from helperkit import numeric
from helperkit.numeric import NumericType
from helperkit.exceptions import ConversionError, HelperKitError
from helperkit.settings import Settings

class TestIsInt(unittest.TestCase):
    def test_integers(self):
        for s in ['42', '-7', '+0', '0007']:
            self.assertTrue(numeric.is_int(s), s)

    def test_non_integers(self):
        for s in ['', '4.2', '4e2', ' 42', '42 ', '+', '-', '--1', '1,000', '٤٢']:
            self.assertFalse(numeric.is_int(s), s)

class TestIsDecimal(unittest.TestCase):
    def test_decimals(self):
        for s in ['4.2', '-0.5', '+.5', '.5', '4.']:
            self.assertTrue(numeric.is_decimal(s), s)

    def test_non_decimals(self):
        for s in ['42', '', '.', '-.', '4.2.1', '1e5', '1.5e3', ' 4.2', 'abc']:
            self.assertFalse(numeric.is_decimal(s), s)

class TestIsNum(unittest.TestCase):
    def test_is_num(self):
        self.assertTrue(numeric.is_num('42'))
        self.assertTrue(numeric.is_num('4.2'))
        self.assertFalse(numeric.is_num('four'))
        self.assertFalse(numeric.is_num(''))

class TestNumericType(unittest.TestCase):
    def test_integer_bounds(self):
        self.assertEqual(NumericType.SHORT.bounds, (-32768, 32767))
        self.assertEqual(NumericType.INT.bounds, (-2**31, 2**31 - 1))
        self.assertEqual(NumericType.LONG.bounds, (-2**63, 2**63 - 1))

    def test_zero(self):
        self.assertEqual(NumericType.INT.zero, 0)
        self.assertIsInstance(NumericType.DOUBLE.zero, float)

    def test_is_integer(self):
        self.assertTrue(NumericType.LONG.is_integer)
        self.assertFalse(NumericType.FLOAT.is_integer)

class TestLenientConversion(unittest.TestCase):
    def test_string_to_int(self):
        self.assertEqual(numeric.string_to_int('42'), 42)
        self.assertEqual(numeric.string_to_int('  -42abc'), -42)
        self.assertEqual(numeric.string_to_int('+5'), 5)
        self.assertEqual(numeric.string_to_int('4.7'), 4)

    def test_malformed_becomes_zero(self):
        for s in ['', 'abc', '0x10', '- 5', '.5']:
            self.assertEqual(numeric.string_to_int(s), 0, s)
        self.assertEqual(numeric.string_to_double('e5'), 0.0)
        self.assertEqual(numeric.string_to_float('nope'), 0.0)

    def test_integers_saturate(self):
        self.assertEqual(numeric.string_to_short('70000'), 32767)
        self.assertEqual(numeric.string_to_short('-70000'), -32768)
        self.assertEqual(numeric.string_to_int('3000000000'), 2**31 - 1)
        self.assertEqual(numeric.string_to_long('9223372036854775808'), 2**63 - 1)

    def test_string_to_long(self):
        self.assertEqual(numeric.string_to_long('9000000000'), 9000000000)

    def test_string_to_double(self):
        self.assertEqual(numeric.string_to_double('2.5e2x'), 250.0)
        self.assertEqual(numeric.string_to_double(' .5'), 0.5)
        self.assertEqual(numeric.string_to_double('-1.'), -1.0)
        self.assertEqual(numeric.string_to_double('7 apples'), 7.0)
        self.assertEqual(numeric.string_to_double('1e999'), math.inf)

    def test_dangling_exponent_is_ignored(self):
        self.assertEqual(numeric.string_to_double('1e'), 1.0)
        self.assertEqual(numeric.string_to_double('2.5e+'), 2.5)

    def test_string_to_float_is_single_precision(self):
        result = numeric.string_to_float('0.1')
        self.assertEqual(result, float(np.float32(0.1)))
        self.assertNotEqual(result, 0.1)

    def test_string_to_float_overflow(self):
        self.assertEqual(numeric.string_to_float('1e39'), math.inf)

    def test_malformed_input_is_logged(self):
        with self.assertLogs('helperkit.numeric', level='DEBUG') as logs:
            numeric.string_to_int('abc')
        self.assertIn('using zero', logs.output[0])

class TestStrictConversion(unittest.TestCase):
    def test_valid(self):
        self.assertEqual(numeric.parse_number('42'), 42)
        self.assertEqual(numeric.parse_number('-32768', NumericType.SHORT), -32768)
        self.assertEqual(numeric.parse_number('1e3', NumericType.DOUBLE), 1000.0)
        self.assertEqual(numeric.parse_number('4.5', NumericType.FLOAT), 4.5)

    def test_malformed(self):
        for s in ['42abc', ' 42', '', '4.2']:
            with self.assertRaises(ConversionError):
                numeric.parse_number(s)

    def test_out_of_range(self):
        with self.assertRaises(ConversionError) as ctx:
            numeric.parse_number('70000', NumericType.SHORT)
        self.assertEqual(ctx.exception.text, '70000')
        self.assertEqual(ctx.exception.numeric_type, 'short')

        with self.assertRaises(ConversionError):
            numeric.parse_number('1e39', NumericType.FLOAT)
        with self.assertRaises(ConversionError):
            numeric.parse_number('1e999', NumericType.DOUBLE)

    def test_error_hierarchy(self):
        with self.assertRaises(ValueError):
            numeric.parse_number('x')
        with self.assertRaises(HelperKitError):
            numeric.parse_number('x')

    def test_strict_flag(self):
        with self.assertRaises(ConversionError):
            numeric.convert_string('abc', NumericType.INT, strict=True)
        self.assertEqual(numeric.convert_string('abc', NumericType.INT, strict=False), 0)

    def test_strict_default_from_settings(self):
        with patch('helperkit.numeric.get_settings', return_value=Settings(strict_conversion=True)):
            with self.assertRaises(ConversionError):
                numeric.convert_string('abc')
            # the named wrappers stay lenient
            self.assertEqual(numeric.string_to_int('abc'), 0)

class TestNumberToString(unittest.TestCase):
    def test_double_to_string(self):
        self.assertEqual(numeric.double_to_string(0.1), '0.1')
        self.assertEqual(numeric.double_to_string(3.0), '3.0')
        self.assertEqual(numeric.double_to_string(-2.5), '-2.5')
        self.assertEqual(numeric.double_to_string(1e20), '1e+20')

    def test_float_to_string(self):
        self.assertEqual(numeric.float_to_string(numeric.string_to_float('0.1')), '0.1')
        self.assertEqual(numeric.float_to_string(3.0), '3.0')

    def test_float_to_string_large_magnitude(self):
        self.assertEqual(numeric.float_to_string(1e20), '1e+20')
        self.assertEqual(numeric.float_to_string(numeric.string_to_float('1e30')), '1e+30')

class TestZeroFill(unittest.TestCase):
    def test_padding(self):
        self.assertEqual(numeric.zero_fill(7, 3), '007')
        self.assertEqual(numeric.zero_fill(0, 2), '00')

    def test_exact_length(self):
        self.assertEqual(numeric.zero_fill(123, 3), '123')

    def test_truncation(self):
        self.assertEqual(numeric.zero_fill(12345, 3), '123')

    def test_negative(self):
        self.assertEqual(numeric.zero_fill(-7, 4), '-007')
        self.assertEqual(numeric.zero_fill(-1234, 3), '-12')

    def test_negative_truncation_can_drop_digits(self):
        self.assertEqual(numeric.zero_fill(-12, 2), '-1')
        self.assertEqual(numeric.zero_fill(-7, 1), '-')

    def test_non_positive_length(self):
        self.assertEqual(numeric.zero_fill(7, 0), '')
        self.assertEqual(numeric.zero_fill(7, -2), '')

    def test_fill_char(self):
        self.assertEqual(numeric.zero_fill(7, 3, fill_char=' '), '  7')
