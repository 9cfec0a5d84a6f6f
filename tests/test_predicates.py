
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

from cv_gallery.predicates import is_archived, is_present


class TestIsPresent(unittest.TestCase):

    def test_present_variants(self):
        for value in ("present", "Present", "PRESENT ", "  present\n"):
            self.assertTrue(is_present(value), value)

    def test_not_present(self):
        for value in (None, "", "2023-01", "presently", "pre sent", 0, date(2023, 1, 1)):
            self.assertFalse(is_present(value), value)


class TestIsArchived(unittest.TestCase):

    def test_archived_tag(self):
        self.assertTrue(is_archived({"tags": ["draft", "archived"]}))

    def test_missing_or_malformed_tags(self):
        self.assertFalse(is_archived({}))
        self.assertFalse(is_archived(None))
        self.assertFalse(is_archived({"tags": "archived"}))
        self.assertFalse(is_archived({"tags": None}))
        self.assertFalse(is_archived("archived"))

    def test_exact_case_sensitive_match(self):
        self.assertFalse(is_archived({"tags": ["Archived"]}))
        self.assertFalse(is_archived({"tags": ["archived "]}))


if __name__ == '__main__':
    unittest.main()
