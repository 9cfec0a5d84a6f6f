
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

from cv_gallery.sections import VALID_SECTIONS, filter_active, validate_excluded_sections


class TestFilterActive(unittest.TestCase):

    def test_drops_archived_and_empty(self):
        items = [{"name": "A"}, None, {"name": "B", "tags": ["archived"]}, {}, {"name": "C"}]
        self.assertEqual(filter_active(items), [{"name": "A"}, {"name": "C"}])

    def test_limit(self):
        items = [{"name": str(i)} for i in range(5)]
        self.assertEqual(len(filter_active(items, limit=3)), 3)

    def test_non_list(self):
        self.assertEqual(filter_active(None), [])
        self.assertEqual(filter_active("projects"), [])


class TestValidateExcludedSections(unittest.TestCase):

    def test_keeps_known_names(self):
        self.assertEqual(validate_excluded_sections(["projects", "socialLinks"]),
                         ["projects", "socialLinks"])

    def test_unknown_names_dropped_with_warning(self):
        with self.assertLogs("cv_gallery.sections", level="WARNING") as logs:
            result = validate_excluded_sections(["projects", "hobbies"])
        self.assertEqual(result, ["projects"])
        self.assertIn("hobbies", logs.output[0])

    def test_production_does_not_warn(self):
        with self.assertLogs("cv_gallery.sections", level="DEBUG") as logs:
            validate_excluded_sections(["hobbies"], warn=False)
        self.assertTrue(all(line.startswith("DEBUG") for line in logs.output))

    def test_duplicates_removed(self):
        self.assertEqual(validate_excluded_sections(["about", "about"]), ["about"])

    def test_closed_enumeration(self):
        self.assertIn("professionalDevelopment", VALID_SECTIONS)
        self.assertEqual(len(VALID_SECTIONS), 13)


if __name__ == '__main__':
    unittest.main()
