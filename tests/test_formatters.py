import unittest
from datetime import date

from utils.formatters import activity_icon, format_date, format_inr, or_dash, parse_float, parse_int


class FormatInrTests(unittest.TestCase):
    def test_integer(self):
        self.assertEqual(format_inr(1500), '₹1500.00')

    def test_separators_are_stripped(self):
        self.assertEqual(format_inr('1,500.50'), '₹1500.50')

    def test_none_is_zero(self):
        self.assertEqual(format_inr(None), '₹0.00')

    def test_unparsable_input_kept(self):
        self.assertEqual(format_inr('1.2.3'), '₹1.2.3')
        self.assertEqual(format_inr('abc'), '₹abc')

    def test_float_rounded_to_paise(self):
        self.assertEqual(format_inr(99.5), '₹99.50')
        self.assertEqual(format_inr('₹ 250'), '₹250.00')

    def test_numbers_never_use_scientific_notation(self):
        self.assertEqual(format_inr(0.00001), '₹0.00')
        self.assertEqual(format_inr(1e16), '₹10000000000000000.00')
        self.assertEqual(format_inr(-2.5), '₹-2.50')

    def test_non_finite_numbers_kept(self):
        self.assertEqual(format_inr(float('inf')), '₹inf')


class FormatDateTests(unittest.TestCase):
    def test_iso_date(self):
        self.assertEqual(format_date('2024-01-05'), 'Jan 5, 2024')

    def test_iso_datetime_with_zulu(self):
        self.assertEqual(format_date('2024-03-15T10:30:00Z'), 'Mar 15, 2024')

    def test_http_date(self):
        self.assertEqual(format_date('Fri, 05 Jan 2024 00:00:00 GMT'), 'Jan 5, 2024')

    def test_date_object(self):
        self.assertEqual(format_date(date(2023, 12, 31)), 'Dec 31, 2023')

    def test_missing_and_garbage(self):
        self.assertEqual(format_date(None), '-')
        self.assertEqual(format_date(''), '-')
        self.assertEqual(format_date('someday'), 'someday')


class HelperTests(unittest.TestCase):
    def test_activity_icons(self):
        self.assertEqual(activity_icon('registration'), 'fa-user-plus')
        self.assertEqual(activity_icon('payment'), 'fa-money-bill-wave')
        self.assertEqual(activity_icon('complaint'), 'fa-comments')
        self.assertEqual(activity_icon('room'), 'fa-bed')
        self.assertEqual(activity_icon('other'), 'fa-bell')
        self.assertEqual(activity_icon(None), 'fa-bell')

    def test_parse_int(self):
        self.assertEqual(parse_int('20'), 20)
        self.assertEqual(parse_int(' 21 years'), 21)
        self.assertEqual(parse_int('19.9'), 19)
        self.assertIsNone(parse_int(''))
        self.assertIsNone(parse_int(None))
        self.assertIsNone(parse_int('abc'))

    def test_parse_float(self):
        self.assertEqual(parse_float('1500.75'), 1500.75)
        self.assertEqual(parse_float('.5'), 0.5)
        self.assertIsNone(parse_float(''))
        self.assertIsNone(parse_float('n/a'))

    def test_parse_float_overflow_is_none(self):
        self.assertIsNone(parse_float('1e400'))
        self.assertIsNone(parse_float('-1e400'))
        self.assertEqual(parse_float('1e3'), 1000.0)

    def test_or_dash(self):
        self.assertEqual(or_dash(None), '-')
        self.assertEqual(or_dash('  '), '-')
        self.assertEqual(or_dash(0), 0)
        self.assertEqual(or_dash('A-101'), 'A-101')


if __name__ == '__main__':
    unittest.main()
