
# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import unittest
from datetime import date

from cv_gallery import dates


class TestFormatYear(unittest.TestCase):

    def test_extracts_four_digit_year(self):
        self.assertEqual(dates.format_year("2021-04"), "2021")
        self.assertEqual(dates.format_year("Spring 2019"), "2019")

    def test_present(self):
        self.assertEqual(dates.format_year(" present"), "Present")

    def test_fallbacks(self):
        self.assertEqual(dates.format_year(None), "")
        self.assertEqual(dates.format_year(""), "")
        self.assertEqual(dates.format_year("soon"), "soon")

    def test_yaml_scalars(self):
        # PyYAML turns 2021-04-01 into a date and 2021 into an int
        self.assertEqual(dates.format_year(date(2021, 4, 1)), "2021")
        self.assertEqual(dates.format_year(2021), "2021")


class TestFormatMonthYear(unittest.TestCase):

    def test_month_and_year(self):
        self.assertEqual(dates.format_month_year("2023-01"), "Jan '23")
        self.assertEqual(dates.format_month_year("2019-12-31"), "Dec '19")

    def test_invalid_month_degrades_to_year(self):
        self.assertEqual(dates.format_month_year("2023-13"), "'23")
        self.assertEqual(dates.format_month_year("2023-00"), "'23")
        self.assertEqual(dates.format_month_year("2023-xx"), "'23")
        self.assertEqual(dates.format_month_year("2023"), "'23")

    def test_present_and_empty(self):
        self.assertEqual(dates.format_month_year("Present"), "Present")
        self.assertEqual(dates.format_month_year(None), "")

    def test_no_year_returns_raw(self):
        self.assertEqual(dates.format_month_year("-05"), "-05")


class TestFormatDateRange(unittest.TestCase):

    def test_span(self):
        self.assertEqual(dates.format_date_range("2020-01", "2023-06"), "'20–'23")

    def test_current(self):
        self.assertEqual(dates.format_date_range("2020-01", "present"), "Current")

    def test_same_year(self):
        self.assertEqual(dates.format_date_range("2020-01", "2020-06"), "'20")

    def test_missing_end(self):
        self.assertEqual(dates.format_date_range("2020-01", None), "'20")

    def test_missing_start(self):
        self.assertEqual(dates.format_date_range(None, "2023-06"), "'23")

    def test_nothing_resolves(self):
        self.assertEqual(dates.format_date_range(None, None), "")
        self.assertEqual(dates.format_date_range("", ""), "")


class TestOtherPolicies(unittest.TestCase):

    def test_month_full_year(self):
        self.assertEqual(dates.format_month_full_year("2023-03"), "Mar 2023")
        self.assertEqual(dates.format_month_full_year("2023"), "2023")
        self.assertEqual(dates.format_month_full_year("PRESENT"), "Present")
        self.assertEqual(dates.format_month_full_year(None), "")

    def test_display_date(self):
        self.assertEqual(dates.format_display_date("2023-03"), "2023-03")
        self.assertEqual(dates.format_display_date("present"), "Present")
        self.assertEqual(dates.format_display_date(date(2023, 3, 1)), "2023-03-01")
        self.assertEqual(dates.format_display_date(None), "")


if __name__ == '__main__':
    unittest.main()
